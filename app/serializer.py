import logging
from typing import Any, Dict

import pydantic

from app.errors import (
    DecodeError,
    MissingFieldError,
    UnknownVariantError,
    ValidationError,
)
from app.schemas.post import Post

logger = logging.getLogger(__name__)


def serialize(post: Post) -> str:
    """Validate ``post`` against the content model and render it as JSON text."""
    try:
        checked = Post.model_validate(post)
    except pydantic.ValidationError as e:
        raise ValidationError(
            f"Post {getattr(post, 'id', '?')!r} is invalid: {_describe(e.errors()[0])}"
        ) from e
    return checked.model_dump_json(exclude_none=True)


def deserialize(text: str | bytes) -> Post:
    """Rebuild a Post from JSON, choosing each block variant by its ``type``."""
    try:
        return Post.model_validate_json(text)
    except pydantic.ValidationError as e:
        logger.debug(f"Rejected post JSON with {e.error_count()} error(s)")
        raise _decode_error(e.errors()) from e


def _decode_error(errors) -> DecodeError:
    for err in errors:
        if err["type"] == "json_invalid":
            return DecodeError(f"Malformed JSON: {err['msg']}")

    for err in errors:
        if err["type"] == "union_tag_invalid":
            tag = err.get("ctx", {}).get("tag", "")
            return UnknownVariantError(tag, _location(err["loc"]))

    for err in errors:
        if err["type"] == "union_tag_not_found":
            return MissingFieldError(_location(err["loc"] + ("type",)))
        if err["type"] == "missing":
            return MissingFieldError(_location(err["loc"]))

    return DecodeError(_describe(errors[0]))


def _location(loc) -> str:
    return ".".join(str(part) for part in loc)


def _describe(err: Dict[str, Any]) -> str:
    where = _location(err["loc"])
    return f"{where}: {err['msg']}" if where else err["msg"]
