"""Form helpers: filter sanitizing and validation-error mapping for the pages."""

from pydantic import ValidationError
from pydantic.alias_generators import to_snake


def sanitize_filter(text: str | None) -> str | None:
    """Keep ASCII letters, digits and spaces (what the API accepts); None when nothing is left."""
    if not text or not text.strip():
        return None
    cleaned = "".join(c for c in text.strip() if (c.isascii() and c.isalnum()) or c == " ")
    return cleaned or None


def field_key(name: str) -> str:
    """Map an API/pydantic field path to a form key: ``Address.ZipCode`` -> ``address.zip_code``."""
    parts = [p for p in str(name).replace("$", "").split(".") if p]
    return ".".join(to_snake(p) for p in parts)


def _loc_key(loc: tuple) -> str:
    # Drop the request section ("body") and list indexes
    parts = [str(p) for p in loc if isinstance(p, str) and p != "body"]
    return field_key(".".join(parts)) if parts else "__all__"


def field_errors(exc: ValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        msg = err.get("msg", "")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        errors.setdefault(_loc_key(err.get("loc", ())), []).append(msg)
    return errors


def merge_api_errors(validation_errors: dict[str, list[str]]) -> dict[str, list[str]]:
    """API validation map (``Email``, ``Address.ZipCode``) keyed by form field."""
    errors: dict[str, list[str]] = {}
    for name, messages in validation_errors.items():
        errors.setdefault(field_key(name) or "__all__", []).extend(messages)
    return errors


def validation_message(prefix: str, errors: dict[str, list[str]]) -> str:
    """Readable one-line summary, e.g. ``Pet validation failed: name: required || kind: invalid``."""
    parts = [f"{key}: {' | '.join(messages)}" for key, messages in errors.items() if messages]
    return f"{prefix}: {' || '.join(parts)}"
