from __future__ import annotations

import ast
from typing import List, Optional

from .classifier import looks_like_sql
from .models import Occurrence
from .positions import SourcePositions

LITERAL_TYPES = (str, bytes, int, float, complex)


def is_literal(node: ast.AST) -> bool:
    if not isinstance(node, ast.Constant):
        return False
    value = node.value
    if isinstance(value, bool):
        return False
    return isinstance(value, LITERAL_TYPES)


def _fstring_fallback(node: ast.JoinedStr) -> str:
    pieces = [
        part.value for part in node.values if isinstance(part, ast.Constant) and isinstance(part.value, str)
    ]
    return "f" + repr("".join(pieces))


class LiteralVisitor:
    """Pre-order walk over a tree that records SQL-looking literals.

    The walk keeps its own stack, so long generated expressions such as
    ``'a' + 'a' + ...`` do not hit the interpreter recursion limit. A
    ``visit_<NodeType>`` handler may return the children to descend into;
    returning ``None`` descends into every child.
    """

    def __init__(self, positions: SourcePositions):
        self.positions = positions
        self.occurrences: List[Occurrence] = []

    def visit(self, tree: ast.AST) -> None:
        stack = [tree]
        while stack:
            node = stack.pop()
            handler = getattr(self, f"visit_{type(node).__name__}", None)
            children = handler(node) if handler is not None else None
            if children is None:
                children = list(ast.iter_child_nodes(node))
            stack.extend(reversed(children))

    def _check(self, node: ast.AST, fallback: str) -> None:
        text = self.positions.text_of(node)
        if text is None:
            text = fallback
        if looks_like_sql(text):
            self.occurrences.append(Occurrence(text=text, line_no=self.positions.line_of(node)))

    def visit_Constant(self, node: ast.Constant) -> Optional[List[ast.AST]]:
        if is_literal(node):
            self._check(node, repr(node.value))
        return None

    def visit_JoinedStr(self, node: ast.JoinedStr) -> Optional[List[ast.AST]]:
        # An f-string is one literal; only its replacement fields are descended,
        # so literals inside those fields are reported on their own as well.
        self._check(node, _fstring_fallback(node))
        return [part for part in node.values if isinstance(part, ast.FormattedValue)]


def collect_occurrences(tree: ast.AST, positions: SourcePositions) -> List[Occurrence]:
    visitor = LiteralVisitor(positions)
    visitor.visit(tree)
    return visitor.occurrences
