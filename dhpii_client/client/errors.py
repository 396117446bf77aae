# dhpii_client/client/errors.py

from typing import Any, Optional

import requests


def _detail_from_response(response: Optional[requests.Response]) -> Optional[str]:
    """Pull the ``detail`` field out of an error response body, if there is one"""
    if response is None:
        return None

    try:
        body = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None

    detail: Any = body.get('detail')
    if not detail:
        return None

    # FastAPI validation errors come back as a list of {loc, msg, type}
    if isinstance(detail, list):
        messages = [
            str(item.get('msg', item)) if isinstance(item, dict) else str(item)
            for item in detail
        ]
        return "; ".join(m for m in messages if m) or None

    return str(detail)


def error_message(exc: BaseException, fallback: str = "Request failed") -> str:
    """
    Turn an exception raised by the client into a message for the user.

    The response body's ``detail`` wins, then the exception's own message,
    then ``fallback``. The result is never empty.

    Args:
        exc: Exception raised by a DHPIIClient call
        fallback: Message used when nothing better is available

    Returns:
        Human readable error message
    """
    response = getattr(exc, 'response', None)
    detail = _detail_from_response(response)
    if detail:
        return detail

    message = str(exc).strip()
    return message or fallback


class InvalidResponseError(requests.RequestException):
    """Raised when a successful response body does not have the documented shape."""
