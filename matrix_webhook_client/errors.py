# -*- coding: utf-8 -*-
"""
matrix_webhook_client.errors

Error taxonomy for a Matrix-Webhook send. Every outcome other than success is
exactly one of the nine kinds below. They are exceptions so callers who prefer
``raise`` can use them (see MatrixWebhookClient.send_or_raise), but the
translator and send functions *return* them as values.

Two errors compare equal when they are the same kind with the same payload.
"""
from __future__ import annotations

from typing import Any, Optional, Tuple

__all__ = [
    "WebhookError",
    "BadUrl",
    "HomeserverReturnedError",
    "HomeserverTimeoutError",
    "NetworkError",
    "NotJoinedToRoom",
    "Unauthorized",
    "WebhookMissingInput",
    "WebhookReturnedInvalidJSON",
    "WebhookTimeoutError",
]


class WebhookError(RuntimeError):
    """Base class of every error kind a send can produce."""

    default_detail = "webhook send failed"

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    def _key(self) -> Tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._key())

    def __reduce__(self) -> Tuple[Any, ...]:
        # rebuild from the payload, not from self.args (the formatted text)
        return (type(self), self._key() or (self.detail,), dict(self.__dict__))

    def __repr__(self) -> str:
        args = ", ".join(repr(v) for v in self._key())
        return f"{type(self).__name__}({args})"


class BadUrl(WebhookError):
    """The computed URL could not be used as a request target."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"bad url: {url!r}")

    def _key(self) -> Tuple[Any, ...]:
        return (self.url,)


class HomeserverReturnedError(WebhookError):
    """
    Catch-all for a non-200 response whose ``ret`` string is not a known one.

    Attributes:
        status_code (int): HTTP status returned by the bridge.
        message (str): the bridge's ``ret`` string, verbatim.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"homeserver returned {status_code}: {message}")

    def _key(self) -> Tuple[Any, ...]:
        return (self.status_code, self.message)


class HomeserverTimeoutError(WebhookError):
    default_detail = "homeserver not responding"


class NetworkError(WebhookError):
    default_detail = "network error"


class NotJoinedToRoom(WebhookError):
    default_detail = "webhook user is not joined to the room"


class Unauthorized(WebhookError):
    default_detail = "invalid API key"


class WebhookMissingInput(WebhookError):
    default_detail = "webhook rejected the request body"


class WebhookReturnedInvalidJSON(WebhookError):
    default_detail = "webhook returned an unparseable error body"


class WebhookTimeoutError(WebhookError):
    default_detail = "webhook did not respond in time"
