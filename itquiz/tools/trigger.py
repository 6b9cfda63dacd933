"""
Posts a parameter sheet to one of the dispatch endpoints.

The sheet is a two-column key/value CSV export, e.g.::

    id,0
    count,3
    webhookUrl,https://discord.com/api/webhooks/...

Meant to be run by an external scheduler (cron, CI schedule) once per
broadcast; no retry is attempted.
"""

from __future__ import annotations

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Iterable, List

import httpx

from ..core.logging import setup_logging

logger = logging.getLogger("itquiz.tools.trigger")

ENDPOINTS = ("send_question", "send_answer")


def sheet_to_payload(rows: Iterable[List[str]]) -> dict:
    """Key/value rows to a dict; a repeated key keeps its last value."""
    payload: dict = {}
    for row in rows:
        if not row or not row[0].strip():
            continue
        payload[row[0].strip()] = row[1].strip() if len(row) > 1 else ""
    return payload


def post(endpoint: str, payload: dict, base_url: str, client: httpx.Client | None = None) -> bool:
    url = f"{base_url.rstrip('/')}/{endpoint}"
    try:
        if client is not None:
            resp = client.post(url, json=payload, headers={"Accept": "application/json"})
        else:
            with httpx.Client() as c:
                resp = c.post(url, json=payload, headers={"Accept": "application/json"})
    except httpx.HTTPError as exc:
        logger.error("Error: %s", exc)
        return False

    logger.info("Response Code: %d", resp.status_code)
    logger.info("Response Body: %s", resp.text)
    return resp.is_success


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Trigger a quiz broadcast")
    parser.add_argument("endpoint", choices=ENDPOINTS, help="Dispatch endpoint to call")
    parser.add_argument("sheet", type=Path, help="Key/value CSV with id, count and webhookUrl")
    parser.add_argument(
        "--base-url",
        default="http://localhost:3000/api/v1",
        help="Backend URL including the API prefix",
    )
    args = parser.parse_args(argv)

    setup_logging()
    try:
        with open(args.sheet, encoding="utf-8-sig", newline="") as fh:
            payload = sheet_to_payload(csv.reader(fh))
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.sheet, exc)
        return 1

    return 0 if post(args.endpoint, payload, args.base_url) else 1


if __name__ == "__main__":
    sys.exit(main())
