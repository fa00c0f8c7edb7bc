"""Helpers for the comma-separated tables rules and models are stored in."""

from __future__ import annotations

import csv
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping, Sequence
    from pathlib import Path


@contextmanager
def open_table(path: Path) -> Iterator[csv.DictReader[str]]:
    """Open ``path`` as a CSV table with whitespace-trimmed header names.

    Bytes that are not valid UTF-8 are kept as lone surrogates so the row holding
    them can be rejected on its own, see ``encoding_error``. Raises ``OSError``
    when the file cannot be opened.
    """

    with path.open(newline="", encoding="utf-8-sig", errors="surrogateescape") as handle:
        reader = csv.DictReader(handle)
        if reader.fieldnames is not None:
            reader.fieldnames = [name.strip() for name in reader.fieldnames]
        yield reader


def field_count_error(row: Mapping[str | None, object], expected: int) -> str | None:
    """Describe a row whose field count differs from the header, else ``None``."""

    if None in row:
        extra = row[None]
        found = expected + (len(extra) if isinstance(extra, list) else 1)
        return f"found record with {found} fields, but the header has {expected} fields"
    missing = sum(1 for value in row.values() if value is None)
    if missing:
        present = expected - missing
        return f"found record with {present} fields, but the header has {expected} fields"
    return None


def encoding_error(row: Mapping[str | None, object]) -> str | None:
    """Name the first field holding bytes that are not valid UTF-8, else ``None``."""

    for name, value in row.items():
        if not isinstance(value, str):
            continue
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            return f"invalid UTF-8 in field {name}"
    return None


def write_table(
    path: Path,
    fieldnames: Sequence[str],
    rows: Iterable[Mapping[str, str | int | None]],
) -> None:
    """Write ``rows`` under ``fieldnames``; ``None`` values become empty cells."""

    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(fieldnames), lineterminator="\n")
        writer.writeheader()
        for row in rows:
            writer.writerow({key: "" if value is None else value for key, value in row.items()})
