import io

import pytest
from rich.console import Console

from sqlhunter.console import RichLogger


@pytest.fixture
def log_buffer():
    return io.StringIO()


@pytest.fixture
def logger(log_buffer):
    console = Console(file=log_buffer, width=200, color_system=None)
    return RichLogger(console=console, verbose=True)
