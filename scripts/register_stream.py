#!/usr/bin/env python3
"""
Register the Fortune Tickets stream with Moralis and attach both contracts.

Example:
    MORALIS__API_KEY=... MORALIS__WEBHOOK_URL=https://indexer.example.com/webhook \
        python scripts/register_stream.py

    python scripts/register_stream.py --dry-run
"""

from __future__ import annotations

import argparse
import json
import sys
import urllib.error
import urllib.request
from typing import Any

from fortune_indexer.core.config import get_settings
from fortune_indexer.integrations.moralis import build_stream_config


def http_json(method: str, url: str, payload: dict[str, Any], api_key: str, timeout: int = 30) -> tuple[int, bytes]:
    data = json.dumps(payload).encode("utf-8")
    headers = {"Content-Type": "application/json", "Accept": "application/json", "X-API-Key": api_key}
    req = urllib.request.Request(url, data=data, headers=headers, method=method)
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return resp.status, resp.read()
    except urllib.error.HTTPError as exc:
        return exc.code, exc.read()


def create_stream(base_url: str, api_key: str, config: dict[str, Any]) -> dict[str, Any]:
    stream = {key: value for key, value in config.items() if key != "contractAddresses"}
    status, body = http_json("PUT", f"{base_url}/streams/evm", stream, api_key)
    if status not in (200, 201):
        raise SystemExit(f"stream creation failed: {status} {body.decode(errors='ignore')}")
    return json.loads(body.decode("utf-8"))


def attach_addresses(base_url: str, api_key: str, stream_id: str, addresses: list[str]) -> dict[str, Any]:
    status, body = http_json(
        "POST", f"{base_url}/streams/evm/{stream_id}/address", {"address": addresses}, api_key
    )
    if status not in (200, 201):
        raise SystemExit(f"attaching addresses failed: {status} {body.decode(errors='ignore')}")
    return json.loads(body.decode("utf-8"))


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the Moralis stream feeding /webhook")
    parser.add_argument("--webhook-url", help="Override the configured webhook URL")
    parser.add_argument("--dry-run", action="store_true", help="Print the stream definition and exit")
    args = parser.parse_args()

    settings = get_settings()
    if args.webhook_url:
        settings.moralis.webhook_url = args.webhook_url
    config = build_stream_config(settings)

    if args.dry_run:
        print(json.dumps(config, indent=2))
        return

    if not settings.moralis_api_key:
        raise SystemExit("MORALIS__API_KEY is not set")

    base_url = settings.moralis.streams_api_url.rstrip("/")
    stream = create_stream(base_url, settings.moralis_api_key, config)
    stream_id = stream.get("id")
    if not stream_id:
        raise SystemExit("stream response missing id")
    print(f"[stream] created {stream_id} -> {config['webhookUrl']}")

    attach_addresses(base_url, settings.moralis_api_key, stream_id, config["contractAddresses"])
    print(f"[stream] attached {', '.join(config['contractAddresses'])}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit("aborted by user")
