"""Shared fixtures: fake terminals and fixed environments."""

import io

import pytest

from termenv.core.environ import MappingEnviron
from termenv.output import reset_default_output


class FakeStream(io.StringIO):
    """In-memory stream that can pretend to be a terminal."""

    def __init__(self, tty: bool = True):
        super().__init__()
        self.tty = tty

    def isatty(self) -> bool:
        return self.tty


@pytest.fixture
def tty_stream() -> FakeStream:
    return FakeStream(tty=True)


@pytest.fixture
def pipe_stream() -> FakeStream:
    return FakeStream(tty=False)


@pytest.fixture
def make_env():
    """Factory for MappingEnviron instances."""
    def _make(**values: str) -> MappingEnviron:
        return MappingEnviron(values)
    return _make


@pytest.fixture(autouse=True)
def _isolate_default_output():
    """Never leak the process-wide Output between tests."""
    reset_default_output()
    yield
    reset_default_output()
