from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

DEFAULT_EXTENSION = ".py"


class WalkError(Exception):
    def __init__(self, path: str, cause: OSError):
        super().__init__(f"{path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


def detect_text_encoding(sample: bytes) -> str:
    if sample.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"
    if sample.startswith(b"\xff\xfe") or sample.startswith(b"\xfe\xff"):
        return "utf-16"
    return "utf-8"


def read_source_text(path: Path) -> str:
    data = path.read_bytes()
    return data.decode(detect_text_encoding(data[:4]))


def is_source_file(path: Path, extension: str = DEFAULT_EXTENSION) -> bool:
    return path.suffix == extension


def _walk_dir(directory: Path, extension: str) -> Iterator[Path]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise WalkError(str(directory), exc) from exc

    for entry in entries:
        path = directory / entry.name
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            raise WalkError(str(path), exc) from exc
        if is_dir:
            yield from _walk_dir(path, extension)
        elif is_source_file(path, extension):
            yield path


def iter_source_files(root: Path, extension: str = DEFAULT_EXTENSION) -> Iterator[Path]:
    if not root.exists():
        raise FileNotFoundError(str(root))

    if not root.is_dir():
        if is_source_file(root, extension):
            yield root
        return

    yield from _walk_dir(root, extension)
