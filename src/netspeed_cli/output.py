"""Status bar JSON line encoding."""
from __future__ import annotations

import json
from typing import IO, Any, Dict, Optional

import click

from analysis.rates import RateTotals
from utils.humanize import format_bytes

ERROR_GLYPH = "⚠"
FIELD_WIDTH = 4


def sample_payload(totals: RateTotals) -> Dict[str, Any]:
    rx = format_bytes(totals.rx_rate)
    tx = format_bytes(totals.tx_rate)
    return {"text": f"{rx:>{FIELD_WIDTH}}  {tx:>{FIELD_WIDTH}} "}


def error_payload(text: str, tooltip: str) -> Dict[str, Any]:
    return {
        "text": f"{ERROR_GLYPH} {text}",
        "tooltip": tooltip,
        "class": "error",
    }


def encode(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False)


class StatusWriter:
    """Writes one JSON object per line; every line is flushed immediately."""

    def __init__(self, stream: Optional[IO[str]] = None):
        self.stream = stream

    def _write(self, payload: Dict[str, Any]) -> None:
        # click.echo flushes after every call
        click.echo(encode(payload), file=self.stream)

    def sample(self, totals: RateTotals) -> None:
        self._write(sample_payload(totals))

    def error(self, text: str, tooltip: str) -> None:
        self._write(error_payload(text, tooltip))
