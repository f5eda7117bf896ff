# -*- coding: utf-8 -*-
"""
Request/response translation for the Matrix-Webhook bridge.

Pure functions only, no I/O and no logging:
- join_url(...)                 → base URL + room id with exactly one "/"
- build_request(...)            → WebhookRequest (POST, url, JSON body)
- interpret_response(...)       → Success or a WebhookError value
- classify_transport_error(...) → WebhookError for an httpx failure

The bridge reports failures as ``{"ret": "<text>"}``. The wording changed
between its v1.0.0 and v3.5.0 releases, so every known string is listed in
_KNOWN_ERRORS; anything else degrades to HomeserverReturnedError.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Dict, Tuple, Type, Union

import httpx
from pydantic import BaseModel, ConfigDict, StrictStr

from .config import WebhookConfig
from .errors import (
    BadUrl,
    HomeserverReturnedError,
    HomeserverTimeoutError,
    NetworkError,
    NotJoinedToRoom,
    Unauthorized,
    WebhookError,
    WebhookMissingInput,
    WebhookReturnedInvalidJSON,
    WebhookTimeoutError,
)

__all__ = [
    "Success",
    "Outcome",
    "WebhookRequest",
    "join_url",
    "build_request",
    "interpret_response",
    "classify_transport_error",
    "is_success",
]


class Success:
    """The message was accepted (HTTP 200). Carries no data."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Success)

    def __hash__(self) -> int:
        return hash(Success)

    def __repr__(self) -> str:
        return "Success()"


Outcome = Union[Success, WebhookError]

# same header httpx sets for json=; nothing else is added
JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class WebhookRequest:
    """Everything the transport needs for one send. No custom headers."""

    url: str
    json_body: Dict[str, str]
    method: str = "POST"

    def serialized_body(self) -> bytes:
        """
        The exact bytes POSTed: compact JSON, stable across builds.

        Non-ASCII is written as ``\\uXXXX`` escapes, so any str (lone
        surrogates included) encodes.
        """
        return json.dumps(self.json_body, separators=(",", ":"), ensure_ascii=True).encode("ascii")

    def headers(self) -> Dict[str, str]:
        return {"Content-Type": JSON_CONTENT_TYPE}


class _ErrorBody(BaseModel):
    # only "ret" matters; the bridge may add other fields
    model_config = ConfigDict(extra="ignore")

    ret: StrictStr


_MISSING_INPUT = (
    # v1
    "I need a json dict with text & key",
    # v2
    "Invalid JSON",
    "Missing text and/or API key property",
    "Unknown formatter",
    # v3
    "Missing body",
    "Missing key",
    "Missing room_id",
    "Missing body, key",
    "Missing body, room_id",
    "Missing key, room_id",
    "Missing body, key, room_id",
)

_UNAUTHORIZED = (
    'I need the good "key"',
    "Invalid API key",
    "Invalid SHA-256 HMAC digest",
)

_KNOWN_ERRORS: Dict[Tuple[int, str], Type[WebhookError]] = {
    **{(400, ret): WebhookMissingInput for ret in _MISSING_INPUT},
    **{(401, ret): Unauthorized for ret in _UNAUTHORIZED},
    (404, "I need the id of the room as a path, and to be in this room"): NotJoinedToRoom,
    (504, "Homeserver not responding"): HomeserverTimeoutError,
}


def join_url(base: str, path: str) -> str:
    """Append ``path`` to ``base`` with exactly one separating slash."""
    if base.endswith("/"):
        return base + path
    return base + "/" + path


def build_request(config: WebhookConfig, message: str) -> WebhookRequest:
    return WebhookRequest(
        method="POST",
        url=join_url(config.base_url, config.room_id),
        json_body={
            "text": message,
            "body": message,
            "key": config.api_key,
            "room_id": config.room_id,
        },
    )


def interpret_response(status_code: int, body: Union[str, bytes]) -> Outcome:
    """
    Classify an HTTP response from the bridge.

    200 is success whatever the body says. Any other status needs a JSON
    object with a string ``ret``; without one the result is
    WebhookReturnedInvalidJSON. Parse failures are never raised.
    """
    if status_code == 200:
        return Success()

    try:
        ret = _ErrorBody.model_validate_json(body).ret
    except ValueError:  # pydantic.ValidationError included
        return WebhookReturnedInvalidJSON()

    kind = _KNOWN_ERRORS.get((status_code, ret))
    if kind is None:
        return HomeserverReturnedError(status_code, ret)
    return kind()


def classify_transport_error(exc: Exception, url: str) -> WebhookError:
    """
    Map a transport failure (no HTTP response obtained) to an error kind.

    Timeouts first: httpx.TimeoutException is itself a TransportError.
    """
    if isinstance(exc, httpx.TimeoutException):
        err: WebhookError = WebhookTimeoutError(str(exc) or None)
    elif isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        err = BadUrl(url)
    elif isinstance(exc, httpx.RequestError):
        err = NetworkError(str(exc) or None)
    else:
        raise TypeError(f"not a transport failure: {exc!r}") from exc
    err.__cause__ = exc
    return err


def is_success(outcome: Outcome) -> bool:
    return isinstance(outcome, Success)
