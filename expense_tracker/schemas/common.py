from typing import Any

from pydantic import BaseModel


class ErrorBody(BaseModel):
    error: str


class MessageBody(BaseModel):
    message: str


def make_error_response(message: str) -> dict[str, Any]:
    return {"error": message}


def make_message_response(message: str) -> dict[str, Any]:
    return {"message": message}


def describe_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Flatten pydantic error dicts into a single human readable line."""
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"
