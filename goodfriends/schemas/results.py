"""Outcome of a backend write call, as seen by the web client."""

import json
from typing import Optional

from pydantic import BaseModel


class ApiResult(BaseModel):
    ok: bool = False
    error: Optional[str] = None
    # Field name -> messages, e.g. {"Email": ["Email is already in use."]}
    validation_errors: Optional[dict[str, list[str]]] = None

    @classmethod
    def success(cls) -> "ApiResult":
        return cls(ok=True)

    @classmethod
    def fail(cls, error: str) -> "ApiResult":
        return cls(ok=False, error=error)

    @classmethod
    def from_bad_request_body(cls, body: str) -> "ApiResult":
        """Parse a 400 body; validation-problem shape -> field errors, anything else -> opaque error."""
        errors = parse_validation_errors(body)
        if errors is not None:
            return cls(ok=False, validation_errors=errors)
        return cls.fail(body if (body or "").strip() else "Bad request.")


def parse_validation_errors(body: str) -> dict[str, list[str]] | None:
    """Return the ``errors`` map of a validation-problem body, or None when the shape does not match."""
    try:
        data = json.loads(body or "")
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    raw = data.get("errors")
    if not isinstance(raw, dict) or not raw:
        return None
    errors: dict[str, list[str]] = {}
    for field, messages in raw.items():
        if isinstance(messages, str):
            messages = [messages]
        if not isinstance(messages, list):
            continue
        errors[str(field)] = [str(m) for m in messages if m is not None and str(m).strip()]
    return errors or None
