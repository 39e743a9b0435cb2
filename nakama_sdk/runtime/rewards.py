"""Sample runtime module: daily rewards and a camelCase message echo.

Payloads are decoded strictly: unknown fields and mistyped values are
rejected with a pydantic `ValidationError`.
"""

from pydantic import BaseModel, ConfigDict, Field

from nakama_sdk.runtime.initializer import Initializer, RpcContext, RuntimeLogger


class Rewards(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    rewards: int = 0


class ProtoTestMessage(BaseModel):
    """Message exchanged by the `protoTest` RPC, camelCase on the wire."""

    model_config = ConfigDict(extra="forbid", strict=True, populate_by_name=True)

    a_string: str = Field(default="", alias="aString")
    a_int: int = Field(default=0, alias="aInt")


def daily_rewards(ctx: RpcContext, logger: RuntimeLogger, payload: str) -> str:
    """Double the requested rewards."""
    logger.info("dailyRewards payload: %r", payload)
    req = Rewards.model_validate_json(payload)
    # zero values are omitted from the response
    return Rewards(rewards=req.rewards * 2).model_dump_json(exclude_defaults=True)


def proto_test(ctx: RpcContext, logger: RuntimeLogger, payload: str) -> str:
    """Greet `aString` and double `aInt`."""
    logger.info("protoTest payload: %r", payload)
    req = ProtoTestMessage.model_validate_json(payload)
    res = ProtoTestMessage(a_string="hello " + req.a_string, a_int=2 * req.a_int)
    return res.model_dump_json(by_alias=True, exclude_defaults=True)


def init_module(logger: RuntimeLogger, initializer: Initializer) -> None:
    """Register this module's RPCs."""
    logger.info("INIT")
    initializer.register_rpc("dailyRewards", daily_rewards)
    initializer.register_rpc("protoTest", proto_test)
