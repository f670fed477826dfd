from __future__ import annotations

import ast
from pathlib import Path

from .console import RichLogger
from .input_sources import read_source_text
from .models import FileOutcome, Processed, Skipped
from .positions import SourcePositions
from .results import MarkdownReport
from .visitor import collect_occurrences


class Scanner:
    def __init__(self, report: MarkdownReport, logger: RichLogger):
        self.report = report
        self.logger = logger

    def parse(self, path: Path) -> tuple[ast.Module, SourcePositions]:
        source = read_source_text(path)
        tree = ast.parse(source, filename=str(path))
        return tree, SourcePositions(source)

    def scan_file(self, path: Path) -> FileOutcome:
        label = str(path)
        try:
            tree, positions = self.parse(path)
            occurrences = tuple(collect_occurrences(tree, positions))
        except SyntaxError as exc:
            reason = f"syntax error at line {exc.lineno}: {exc.msg}"
        except UnicodeDecodeError as exc:
            reason = f"not valid UTF-8 ({exc.reason})"
        except RecursionError:
            reason = "nesting too deep to analyse"
        except (OSError, ValueError) as exc:
            reason = str(exc)
        else:
            if occurrences:
                self.report.write_section(label, occurrences)
                self.logger.debug(f"Hit {label}: {len(occurrences)} occurrence(s)")
            else:
                self.logger.debug(f"Clean {label}")
            return Processed(path=label, occurrences=occurrences)

        self.logger.warn(f"Failed to parse {label}: {reason}")
        return Skipped(path=label, reason=reason)
