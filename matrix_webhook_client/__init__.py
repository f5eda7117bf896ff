# -*- coding: utf-8 -*-
"""
matrix_webhook_client.__init__

Public surface of the Matrix-Webhook client.

Exports:
    - WebhookConfig       : immutable base URL / API key / room id.
    - send_message        : POST one message, return Success or a WebhookError.
    - async_send_message  : async twin of send_message.
    - send_raw            : bool-only convenience wrapper.
    - MatrixWebhookClient : reusable client bound to one config.
    - build_request / interpret_response / join_url : the pure translator.
    - WebhookError and its nine kinds.
"""

from .client import MatrixWebhookClient, async_send_message, send_message, send_raw
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
from .translator import (
    Outcome,
    Success,
    WebhookRequest,
    build_request,
    classify_transport_error,
    interpret_response,
    is_success,
    join_url,
)

__all__ = [
    "MatrixWebhookClient",
    "async_send_message",
    "send_message",
    "send_raw",
    "WebhookConfig",
    "Outcome",
    "Success",
    "WebhookRequest",
    "build_request",
    "classify_transport_error",
    "interpret_response",
    "is_success",
    "join_url",
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
