"""Server-side runtime support.

Runtime modules expose an `init_module(logger, initializer)` function that
registers RPC handlers. `nakama_sdk.runtime.rewards` is the sample module
called by the client's `RpcRequest`.
"""

from nakama_sdk.runtime.initializer import Initializer, RpcContext, RpcFunction, RuntimeLogger

__all__ = ["Initializer", "RpcContext", "RpcFunction", "RuntimeLogger"]
