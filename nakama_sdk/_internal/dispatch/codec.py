"""Request body encoding and response body decoding."""

import json
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from nakama_sdk.exceptions import NakamaDecodeError


def encode_body(body: Any) -> bytes | None:
    """Serialize a request body.

    Pydantic models are encoded with their schema (field aliases, unset
    fields omitted). Anything else is encoded with the json module.

    Args:
        body: The payload, or None.

    Returns:
        UTF-8 JSON bytes, or None when there is no body.
    """
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
    return json.dumps(body, separators=(",", ":")).encode("utf-8")


@lru_cache(maxsize=256)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def decode_body(content: bytes, response_type: Any) -> Any:
    """Decode a response body into `response_type`.

    Args:
        content: Raw response bytes.
        response_type: Target type (pydantic model, builtin, or any type
            pydantic can validate).

    Returns:
        The decoded value, or None for an empty body.

    Raises:
        NakamaDecodeError: If the content is not valid JSON for the type.
    """
    if not content.strip():
        return None
    try:
        return _adapter(response_type).validate_json(content)
    except ValidationError as e:
        name = getattr(response_type, "__name__", repr(response_type))
        raise NakamaDecodeError(f"unable to decode response as {name}: {e}") from e
