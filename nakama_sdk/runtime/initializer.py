"""RPC registry for server-side runtime modules."""

import sys
from collections.abc import Callable

from pydantic import BaseModel, Field

from nakama_sdk.exceptions import RpcNotFoundError, RuntimeRegistrationError


class RpcContext(BaseModel):
    """Caller information passed to every RPC handler."""

    user_id: str | None = None
    username: str | None = None
    session_id: str | None = None
    vars: dict[str, str] = Field(default_factory=dict)
    query_params: dict[str, list[str]] = Field(default_factory=dict)


class RuntimeLogger:
    """Logger handed to runtime modules.

    Writes `[nakama-runtime] LEVEL message` lines to stderr. Messages are
    %-formatted with any extra arguments. Debug lines are only written
    when `debug` is on.
    """

    def __init__(self, *, debug: bool = False) -> None:
        self._debug = debug

    def _write(self, level: str, message: str, args: tuple) -> None:
        if args:
            message = message % args
        print(f"[nakama-runtime] {level} {message}", file=sys.stderr)

    def debug(self, message: str, *args: object) -> None:
        if self._debug:
            self._write("DEBUG", message, args)

    def info(self, message: str, *args: object) -> None:
        self._write("INFO", message, args)

    def warn(self, message: str, *args: object) -> None:
        self._write("WARN", message, args)

    def error(self, message: str, *args: object) -> None:
        self._write("ERROR", message, args)


RpcFunction = Callable[[RpcContext, RuntimeLogger, str], str]


class Initializer:
    """Holds the RPC functions registered by runtime modules.

    Handlers take `(ctx, logger, payload)` and return the response
    payload. Both payloads are JSON strings.
    """

    def __init__(self, logger: RuntimeLogger | None = None) -> None:
        self._logger = logger or RuntimeLogger()
        self._rpcs: dict[str, RpcFunction] = {}

    @property
    def rpc_ids(self) -> list[str]:
        return sorted(self._rpcs)

    def register_rpc(self, id: str, fn: RpcFunction) -> None:
        """Register `fn` under `id`.

        Raises:
            RuntimeRegistrationError: If `id` is empty or already registered.
        """
        if not id:
            raise RuntimeRegistrationError("rpc id cannot be empty")
        if id in self._rpcs:
            raise RuntimeRegistrationError(f"rpc {id!r} is already registered")
        self._rpcs[id] = fn

    def call(self, id: str, payload: str, ctx: RpcContext | None = None) -> str:
        """Run the RPC registered under `id`.

        Errors raised by the handler propagate unchanged.

        Raises:
            RpcNotFoundError: If nothing is registered under `id`.
        """
        fn = self._rpcs.get(id)
        if fn is None:
            raise RpcNotFoundError(f"rpc {id!r} not found")
        return fn(ctx or RpcContext(), self._logger, payload)
