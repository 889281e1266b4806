"""HTTP service that relays the USD-BRL bid and records each one in SQLite."""

from __future__ import annotations

import argparse
import json
import logging
import sqlite3
import urllib.request
from contextlib import closing
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

API_URL = "https://economia.awesomeapi.com.br/USD-BRL"
DB_PATH = "values.db"
FETCH_TIMEOUT = 0.3
DB_TIMEOUT = 0.01
QUOTE_PATH = "/cotacao"

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS cotacoes "
    "(id INTEGER PRIMARY KEY, bid TEXT, timestamp DATETIME DEFAULT CURRENT_TIMESTAMP)"
)
_INSERT_BID = "INSERT INTO cotacoes (bid) VALUES (?)"

logger = logging.getLogger(__name__)


def fetch_bid(url: str = API_URL, timeout: float = FETCH_TIMEOUT) -> str:
    """Fetch the quote list from ``url`` and return the bid of its first entry."""
    with urllib.request.urlopen(url, timeout=timeout) as response:
        quotes = json.load(response)
    if not isinstance(quotes, list):
        raise ValueError("expected a JSON array of quotes")
    first = quotes[0]
    if not isinstance(first, dict):
        raise ValueError("expected a JSON object for the quote")
    bid = first.get("bid", "")
    if not isinstance(bid, str):
        raise ValueError("bid is not a JSON string")
    return bid


def save_bid(bid: str, db_path: str = DB_PATH, timeout: float = DB_TIMEOUT) -> None:
    """Store ``bid`` in the ``cotacoes`` table, creating it when missing."""
    with closing(sqlite3.connect(db_path, timeout=timeout)) as conn, conn:
        conn.execute(_CREATE_TABLE)
        conn.execute(_INSERT_BID, (bid,))
    logger.info("Value saved successfully!")


class QuoteHandler(BaseHTTPRequestHandler):
    """Answers ``GET /cotacao`` with the current bid encoded as a JSON string."""

    api_url = API_URL
    db_path = DB_PATH
    fetch_timeout = FETCH_TIMEOUT
    db_timeout = DB_TIMEOUT

    def do_GET(self) -> None:
        if urlsplit(self.path).path != QUOTE_PATH:
            self._send(HTTPStatus.NOT_FOUND, "404 page not found\n", "text/plain; charset=utf-8")
            return

        try:
            bid = fetch_bid(self.api_url, self.fetch_timeout)
        except Exception as exc:  # any upstream failure becomes a 500
            self._send(HTTPStatus.INTERNAL_SERVER_ERROR, f"{exc}\n", "text/plain; charset=utf-8")
            return

        try:
            save_bid(bid, self.db_path, self.db_timeout)
        except sqlite3.Error as exc:
            logger.error("Error saving values: %s", exc)

        logger.info("Start request.")
        try:
            self._send(HTTPStatus.OK, json.dumps(bid) + "\n", "application/json")
        finally:
            logger.info("Finished request.")

    def _send(self, status: HTTPStatus, text: str, content_type: str) -> None:
        body = text.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)


def serve(host: str = "", port: int = 8080) -> None:
    """Run the quote service until interrupted."""
    with ThreadingHTTPServer((host, port), QuoteHandler) as server:
        server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve the USD-BRL bid over HTTP.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())