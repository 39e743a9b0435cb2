"""Request dispatch internals.

WARNING: This is a system-level module used by the Nakama clients.
Do not call directly from user code.
"""

from nakama_sdk._internal.dispatch.codec import decode_body, encode_body
from nakama_sdk._internal.dispatch.models import QueryParams, RequestSpec
from nakama_sdk._internal.dispatch.redaction import redact_payload

__all__ = [
    "RequestSpec",
    "QueryParams",
    "encode_body",
    "decode_body",
    "redact_payload",
]
