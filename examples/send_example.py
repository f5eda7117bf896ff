#!/usr/bin/env python3
# examples/send_example.py

import os
import sys

from matrix_webhook_client import MatrixWebhookClient, Success, WebhookConfig

BASE = os.getenv("MATRIX_WEBHOOK_URL", "http://127.0.0.1:4785")
KEY = os.getenv("MATRIX_WEBHOOK_API_KEY", "")
ROOM = os.getenv("MATRIX_WEBHOOK_ROOM", "!example:matrix.org")


def main() -> int:
    text = " ".join(sys.argv[1:]) or "hello from matrix-webhook-client"
    cfg = WebhookConfig(BASE, KEY, ROOM)
    with MatrixWebhookClient(cfg, timeout=10.0) as hook:
        outcome = hook.send(text)

    if isinstance(outcome, Success):
        print(f"sent to {ROOM}")
        return 0
    print(f"send failed: {outcome!r} ({outcome})", file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
