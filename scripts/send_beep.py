"""
Post a beep to a running Beepboard server.

Reads the bearer token from BEEPBOARD_SECRET (a .env file in the project
root is honoured, same as the server).

Usage:
    python scripts/send_beep.py "deploy finished"
    python scripts/send_beep.py --url http://beeps.example:7331 "disk at 90%"
"""

import argparse
import os
import sys

import httpx
from dotenv import load_dotenv

from beepboard.config import ENV_FILE

DEFAULT_URL = "http://localhost:7331"


def send_beep(url: str, token: str, text: str) -> httpx.Response:
    """POST {"text": text} to <url>/beeps with the bearer token."""
    return httpx.post(
        f"{url.rstrip('/')}/beeps",
        json={"text": text},
        headers={"Authorization": f"Bearer {token}"},
        timeout=10.0,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Post a beep")
    parser.add_argument("text", help="Text of the beep")
    parser.add_argument("--url", default=DEFAULT_URL, help=f"Server base URL (default {DEFAULT_URL})")
    args = parser.parse_args(argv)

    load_dotenv(ENV_FILE)
    token = os.environ.get("BEEPBOARD_SECRET")
    if not token:
        print("BEEPBOARD_SECRET is not set", file=sys.stderr)
        return 2

    try:
        resp = send_beep(args.url, token, args.text)
    except httpx.HTTPError as e:
        print(f"Request failed: {e}", file=sys.stderr)
        return 1

    if resp.status_code != 201:
        print(f"Unexpected status {resp.status_code}", file=sys.stderr)
        return 1
    print("Beep sent.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
