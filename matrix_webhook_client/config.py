# -*- coding: utf-8 -*-
"""
Connection settings for a Matrix-Webhook bridge.

WebhookConfig is an immutable value: base URL, API key and target room.
Nothing is validated here; a bad URL or key surfaces later as a typed error.
"""
from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["WebhookConfig"]


@dataclass(frozen=True)
class WebhookConfig:
    """
    Where and how to post messages.

    Example:
        cfg = WebhookConfig("https://hooks.example.org", "s3cret", "!abc:example.org")
    """

    base_url: str
    # kept out of repr() so it never ends up in logs or tracebacks
    api_key: str = field(repr=False)
    room_id: str

    @classmethod
    def create(cls, base_url: str, api_key: str, room_id: str) -> "WebhookConfig":
        return cls(base_url, api_key, room_id)
