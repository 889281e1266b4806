"""Client that asks the quote service for the bid and appends it to a file."""

from __future__ import annotations

import argparse
import json
import sys
import urllib.request
from datetime import datetime

SERVICE_URL = "http://localhost:8080/cotacao"
OUTPUT_PATH = "cotacao.txt"
FETCH_TIMEOUT = 0.3


def fetch_quote(url: str = SERVICE_URL, timeout: float = FETCH_TIMEOUT) -> str:
    """Request the quote service and return the bid it answers with."""
    with urllib.request.urlopen(url, timeout=timeout) as response:
        quote = json.load(response)
    if not isinstance(quote, str):
        raise ValueError("quote is not a JSON string")
    return quote


def save_quote(quote: str, path: str = OUTPUT_PATH, now: datetime | None = None) -> str:
    """Append a timestamped line for ``quote`` to ``path`` and return that line."""
    stamp = (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    line = f"Cotação: {quote} - salvo em: {stamp}\n"
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(line)
    return line


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch the current bid and record it.")
    parser.add_argument("--url", default=SERVICE_URL)
    parser.add_argument("--output", default=OUTPUT_PATH)
    args = parser.parse_args(argv)

    try:
        quote = fetch_quote(args.url)
    except (OSError, ValueError) as exc:
        print("Error get value: ", exc, file=sys.stderr)
        return 1

    try:
        save_quote(quote, args.output)
    except OSError as exc:
        print("Error saving values: ", exc, file=sys.stderr)
        return 1

    print("Cotação: ", quote)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())