"""Remote procedure call request."""

from typing import Annotated, Any, Self

from nakama_sdk._internal.dispatch.models import RequestSpec
from nakama_sdk.requests._base import PathId, Query, Request


class RpcRequest(Request):
    """Call a server runtime function.

    The payload is sent as the raw JSON body (`unwrap=true`), encoded
    with its schema when it is a pydantic model. When `result_type` is
    given the response body decodes into it; otherwise it is discarded.

    With an HTTP key the call is made without a session, so it can be
    used by server-to-server callers.

    Example:
        result = RpcRequest("dailyRewards", Rewards(rewards=5), Rewards).do(client)
    """

    method = "POST"
    path = "v2/rpc/{id}"

    id: PathId
    payload: Any = None
    result_type: Any = None
    http_key: Annotated[str | None, Query()] = None

    def __init__(self, id: str, payload: Any = None, result_type: Any = None, **data: Any) -> None:
        super().__init__(id=id, payload=payload, result_type=result_type, **data)

    def with_http_key(self, http_key: str) -> Self:
        self.http_key = http_key
        return self

    def build(self) -> RequestSpec:
        spec = super().build()
        return RequestSpec(
            method=spec.method,
            path=spec.path,
            requires_auth=self.http_key is None,
            query={"unwrap": "true", **spec.query},
            body=self.payload,
            response_type=self.result_type,
        )
