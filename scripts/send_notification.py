#!/usr/bin/env python3
"""Send a push notification through a running operation server.

Requires the server to be running:
    python -m fcm_operation

Usage:
    python scripts/send_notification.py --topic news --title Hi [--dry-run]
    python scripts/send_notification.py --token TOKEN --body "Hello"
    python scripts/send_notification.py --tokens T1 T2 T3 --data key=value
"""

import argparse
import json
import sys

import httpx

OPERATION_PATH = "/operations/firebase-messaging"


def _parse_data(pairs: list[str]) -> dict[str, str]:
    data: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise SystemExit(f"--data expects key=value, got {pair!r}")
        data[key] = value
    return data


def build_options(args: argparse.Namespace) -> dict[str, object]:
    options: dict[str, object] = {"dryRun": args.dry_run}
    if args.token:
        options.update(recipientType="token", deviceToken=args.token)
    elif args.tokens:
        options.update(recipientType="tokens", deviceTokens=args.tokens)
    else:
        options.update(recipientType="topic", topic=args.topic)

    if args.title:
        options["notificationTitle"] = args.title
    if args.body:
        options["notificationBody"] = args.body
    if args.data:
        options["dataPayload"] = _parse_data(args.data)
    if args.priority:
        options["priority"] = args.priority
    if args.ttl is not None:
        options["timeToLive"] = args.ttl
    return options


def main() -> None:
    parser = argparse.ArgumentParser(description="Send an FCM push notification")
    parser.add_argument(
        "--server-url",
        default="http://localhost:8000",
        help="Operation server base URL (default: http://localhost:8000)",
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--token", help="Single device registration token")
    target.add_argument("--tokens", nargs="+", help="Up to 500 device tokens")
    target.add_argument("--topic", help="Topic name")
    parser.add_argument("--title")
    parser.add_argument("--body")
    parser.add_argument("--data", nargs="*", default=[], metavar="KEY=VALUE")
    parser.add_argument("--priority", choices=["normal", "high"])
    parser.add_argument("--ttl", type=int, help="Time to live in seconds")
    parser.add_argument("--dry-run", action="store_true", help="Validate only")
    args = parser.parse_args()

    with httpx.Client(base_url=args.server_url, timeout=30.0) as client:
        try:
            resp = client.post(OPERATION_PATH, json=build_options(args))
        except httpx.ConnectError:
            print(f"Cannot connect to {args.server_url}")
            print("Make sure the server is running: python -m fcm_operation")
            sys.exit(1)

    body = resp.json()
    print(json.dumps(body, indent=2))
    if resp.status_code != 200 or not body.get("success"):
        sys.exit(1)


if __name__ == "__main__":
    main()
