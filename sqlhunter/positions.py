"""Resolve syntax tree nodes back to their place in the source text."""

from __future__ import annotations

import ast
from typing import Optional


class SourcePositions:
    """Line and text lookups for the nodes of one parsed file.

    ``ast`` reports columns as UTF-8 byte offsets and counts lines split on
    ``\\n``, ``\\r`` and ``\\r\\n`` only, so the table keeps the encoded lines.
    """

    def __init__(self, source: str):
        self._lines = source.encode("utf-8").splitlines(keepends=True)

    def line_of(self, node: ast.AST) -> int:
        return getattr(node, "lineno", 0)

    def text_of(self, node: ast.AST) -> Optional[str]:
        lineno = getattr(node, "lineno", None)
        end_lineno = getattr(node, "end_lineno", None)
        start_col = getattr(node, "col_offset", None)
        end_col = getattr(node, "end_col_offset", None)
        if None in (lineno, end_lineno, start_col, end_col):
            return None
        start = lineno - 1
        end = end_lineno - 1
        if start < 0 or end >= len(self._lines) or start > end:
            return None

        if start == end:
            chunk = self._lines[start][start_col:end_col]
        else:
            first = self._lines[start][start_col:]
            middle = self._lines[start + 1 : end]
            last = self._lines[end][:end_col]
            chunk = b"".join([first, *middle, last])
        return chunk.decode("utf-8", errors="replace")
