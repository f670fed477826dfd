from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import IO, Dict, Optional, Sequence

from rich.table import Table

from .models import FileOutcome, Occurrence, Processed


def format_section(source: str, occurrences: Sequence[Occurrence]) -> str:
    parts = [
        f"### File: {source}\n\n",
        f"**Found {len(occurrences)} occurrence(s) of SQL**\n\n",
        "---\n",
    ]
    for occ in occurrences:
        parts.append(f"Line {occ.line_no} :\n")
        parts.append("```SQL\n")
        parts.append(occ.text)
        parts.append("\n```\n\n")
    return "".join(parts)


class MarkdownReport:
    def __init__(self, path: Path):
        self.path = path
        self._handle: Optional[IO[str]] = open(path, "w", encoding="utf-8", newline="")
        self.sections = 0

    @property
    def closed(self) -> bool:
        return self._handle is None

    def write_section(self, source: str, occurrences: Sequence[Occurrence]) -> None:
        if not occurrences:
            return
        if self._handle is None:
            raise ValueError(f"Report already closed: {self.path}")
        self._handle.write(format_section(source, occurrences))
        self.sections += 1

    def close(self) -> None:
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        handle.close()

    def __enter__(self) -> "MarkdownReport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@dataclass
class ScanSummary:
    files_scanned: int = 0
    files_skipped: int = 0
    files_with_sql: int = 0
    occurrences: int = 0

    def record(self, outcome: FileOutcome) -> None:
        if not isinstance(outcome, Processed):
            self.files_skipped += 1
            return
        self.files_scanned += 1
        if outcome.occurrences:
            self.files_with_sql += 1
            self.occurrences += len(outcome.occurrences)

    def as_dict(self) -> Dict[str, int]:
        return {
            "files_scanned": self.files_scanned,
            "files_skipped": self.files_skipped,
            "files_with_sql": self.files_with_sql,
            "occurrences": self.occurrences,
        }

    def to_table(self) -> Table:
        table = Table(title="SQL Literal Summary", header_style="bold")
        table.add_column("Metric", style="cyan")
        table.add_column("Count", justify="right")
        for key, value in self.as_dict().items():
            table.add_row(key.replace("_", " "), str(value))
        return table
