"""Shared symbol list: CSV parsing, table view and the submission service."""

from __future__ import annotations

import re
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass, field
from datetime import datetime, timezone

from .hashing import MASK
from .tools import parse_hex

HEADERS = (
    "Mangled",
    "Demangled NVIDIA",
    "Demangled",
    "Address (CHN)",
    "Time added",
    "Comment",
)
COLUMN_COUNT = len(HEADERS)
ACCEPTED_REPLY = "ok"
REQUEST_TIMEOUT = 30.0

_FIELD = re.compile(r'"[^"]*"|[^,]+')
_DECIMAL = re.compile(r"\+?[0-9]+")


class SubmissionError(Exception):
    """The symbol service did not accept a submitted symbol."""

    def __init__(self, message: str, reason: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason


def _epoch() -> datetime:
    return datetime.fromtimestamp(0, tz=timezone.utc)


@dataclass
class SymbolInfo:
    """One row of the shared symbol list."""

    mangled: str
    demangled_nvidia: str
    demangled: str
    address: int = 0
    time_added: datetime = field(default_factory=_epoch)
    comment: str = ""
    is_cracked: bool = True


def _unquote(text: str) -> str:
    return text[1:-1]


def _parse_uint(text: str) -> int:
    text = text.strip()
    if _DECIMAL.fullmatch(text) is None:
        return 0
    value = int(text)
    return value if value <= MASK else 0


def _parse_row(row: str) -> SymbolInfo:
    fields = _FIELD.findall(row)
    if len(fields) < 5:
        raise ValueError(f"symbol row has {len(fields)} fields, expected 5: {row!r}")
    mangled, demangled_nvidia, demangled = (_unquote(f) for f in fields[:3])
    return SymbolInfo(
        mangled=mangled,
        demangled_nvidia=demangled_nvidia,
        demangled=demangled,
        address=parse_hex(fields[3]),
        time_added=datetime.fromtimestamp(_parse_uint(fields[4]), tz=timezone.utc),
    )


def parse_symbol_csv(csv: str) -> list[SymbolInfo]:
    """Parse the service's CSV listing; blank lines are skipped."""
    return [_parse_row(row) for row in csv.split("\n") if row.strip()]


class SymbolTable:
    """Six-column table of known symbols."""

    column_count = COLUMN_COUNT

    def __init__(self) -> None:
        self.symbols: list[SymbolInfo] = []

    def __len__(self) -> int:
        return len(self.symbols)

    @property
    def row_count(self) -> int:
        return len(self.symbols)

    def load_csv(self, csv: str) -> None:
        """Append the rows of ``csv`` to the table."""
        self.symbols.extend(parse_symbol_csv(csv))

    def header(self, section: int) -> str | None:
        """Return the title of a column, or None outside the table."""
        if 0 <= section < COLUMN_COUNT:
            return HEADERS[section]
        return None

    def cell(self, row: int, column: int) -> str | datetime:
        """Return the displayed value of one cell."""
        symbol = self.symbols[row]
        if column == 0:
            return symbol.mangled
        if column == 1:
            return symbol.demangled_nvidia
        if column == 2:
            return symbol.demangled
        if column == 3:
            return f"0x{symbol.address:x}"
        if column == 4:
            return symbol.time_added
        return ""


def _get(url: str) -> str:
    with urllib.request.urlopen(url, timeout=REQUEST_TIMEOUT) as response:
        return response.read().decode("utf-8")


def fetch_symbol_list(base_url: str) -> SymbolTable:
    """Download the symbol list from the service at ``base_url``.

    Network and HTTP failures propagate as ``urllib.error.URLError``.
    """
    table = SymbolTable()
    table.load_csv(_get(base_url.rstrip("/") + "/symbols"))
    return table


def submit_symbol(base_url: str, name: str) -> str:
    """Submit a cracked symbol name; return the service's reply when accepted."""
    url = (
        base_url.rstrip("/")
        + "/submit_symbol?sym="
        + urllib.parse.quote(name, safe="")
    )
    try:
        reply = _get(url)
    except (urllib.error.URLError, OSError) as exc:
        raise SubmissionError(f"Error submitting symbol:\n{exc}") from exc
    if reply != ACCEPTED_REPLY:
        raise SubmissionError(
            f"Symbol not added to database.\nReason:\n{reply}", reason=reply
        )
    return reply