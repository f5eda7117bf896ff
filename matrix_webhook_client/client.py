# SPDX-License-Identifier: MIT
"""
matrix_webhook_client.client

HTTP boundary for the Matrix-Webhook bridge, built on httpx.

Public API
----------
send_message(config, message, *, timeout=20.0, client=None) -> Outcome
async_send_message(config, message, *, timeout=20.0, client=None) -> Outcome
send_raw(base_url, api_key, room_id, message) -> bool
MatrixWebhookClient(config, *, timeout=20.0, transport=None)

Each send is one POST with no retries. Transport failures and non-200
responses come back as WebhookError values; nothing here raises on a failed
send except MatrixWebhookClient.send_or_raise.

Logging is library-safe: module logger only, with a stderr handler attached
when MATRIX_WEBHOOK_DEBUG=1. The API key is never logged.
"""
from __future__ import annotations

import logging
import os
from typing import Optional, Union

import httpx

from .config import WebhookConfig
from .errors import WebhookError
from .translator import (
    Outcome,
    WebhookRequest,
    build_request,
    classify_transport_error,
    interpret_response,
    is_success,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "MatrixWebhookClient",
    "async_send_message",
    "send_message",
    "send_raw",
]

DEFAULT_TIMEOUT = 20.0

_log = logging.getLogger("matrix_webhook_client.client")


def _maybe_configure_logging() -> None:
    dbg = (os.getenv("MATRIX_WEBHOOK_DEBUG") or "").strip().lower()
    if dbg in ("1", "true", "yes", "on"):
        if not _log.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter("[matrix-webhook][client] %(levelname)s: %(message)s")
            )
            _log.addHandler(handler)
        _log.setLevel(logging.DEBUG)


_maybe_configure_logging()


def _log_outcome(req: WebhookRequest, outcome: Outcome) -> Outcome:
    if is_success(outcome):
        _log.debug("send: %s -> ok", req.url)
    else:
        _log.debug("send: %s -> %r", req.url, outcome)
    return outcome


def _post(client: httpx.Client, req: WebhookRequest) -> Outcome:
    try:
        resp = client.request(
            req.method, req.url, content=req.serialized_body(), headers=req.headers()
        )
    except (httpx.RequestError, httpx.InvalidURL) as e:
        # no HTTP response: timeout / network / unusable URL
        return classify_transport_error(e, req.url)
    return interpret_response(resp.status_code, resp.content)


async def _apost(client: httpx.AsyncClient, req: WebhookRequest) -> Outcome:
    try:
        resp = await client.request(
            req.method, req.url, content=req.serialized_body(), headers=req.headers()
        )
    except (httpx.RequestError, httpx.InvalidURL) as e:
        return classify_transport_error(e, req.url)
    return interpret_response(resp.status_code, resp.content)


def send_message(
    config: WebhookConfig,
    message: str,
    *,
    timeout: Union[float, httpx.Timeout] = DEFAULT_TIMEOUT,
    client: Optional[httpx.Client] = None,
) -> Outcome:
    """
    Post ``message`` to the configured room and classify the result.

    Parameters:
        config: connection settings.
        message: text to send; empty is allowed.
        timeout: transport timeout when no ``client`` is given.
        client: optional caller-owned httpx.Client (left open).

    Returns:
        Success() or one WebhookError instance.
    """
    req = build_request(config, message)
    _log.debug("send: POST %s (room %s)", req.url, config.room_id)
    if client is not None:
        return _log_outcome(req, _post(client, req))
    with httpx.Client(timeout=timeout) as owned:
        return _log_outcome(req, _post(owned, req))


async def async_send_message(
    config: WebhookConfig,
    message: str,
    *,
    timeout: Union[float, httpx.Timeout] = DEFAULT_TIMEOUT,
    client: Optional[httpx.AsyncClient] = None,
) -> Outcome:
    """Async twin of send_message()."""
    req = build_request(config, message)
    _log.debug("send: POST %s (room %s)", req.url, config.room_id)
    if client is not None:
        return _log_outcome(req, await _apost(client, req))
    async with httpx.AsyncClient(timeout=timeout) as owned:
        return _log_outcome(req, await _apost(owned, req))


def send_raw(base_url: str, api_key: str, room_id: str, message: str) -> bool:
    """Fire-and-check: True on success, False for every error kind."""
    return is_success(send_message(WebhookConfig(base_url, api_key, room_id), message))


class MatrixWebhookClient:
    """
    Reusable sync client bound to one webhook and room.

    Example:
        from matrix_webhook_client import MatrixWebhookClient, WebhookConfig
        cfg = WebhookConfig("https://hooks.example.org", "s3cret", "!abc:example.org")
        with MatrixWebhookClient(cfg) as hook:
            outcome = hook.send("deploy finished")
    """

    def __init__(
        self,
        config: WebhookConfig,
        *,
        timeout: Union[float, httpx.Timeout] = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.config = config
        self._http = httpx.Client(timeout=timeout, transport=transport)

    # ------------------------------- public API --------------------------- #

    def build(self, message: str) -> WebhookRequest:
        return build_request(self.config, message)

    def send(self, message: str) -> Outcome:
        return send_message(self.config, message, client=self._http)

    def send_or_raise(self, message: str) -> None:
        """Like send(), but raise the WebhookError instead of returning it."""
        outcome = self.send(message)
        if isinstance(outcome, WebhookError):
            raise outcome

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "MatrixWebhookClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
