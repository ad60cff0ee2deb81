"""
Shared pytest fixtures for hashgen tests.

- reset_container: autouse, isolates every test from bootstrap state
- fake_backend: in-memory DigestBackend that records every digest call
- generator: HashGenerator wired to the real hashlib backend
"""

import os
from pathlib import Path

import pytest

from hashgen.backends import HashlibBackend
from hashgen.core.bootstrap import reset
from hashgen.core.interfaces.backend import DigestBackend
from hashgen.generator import HashGenerator


class FakeBackend(DigestBackend):
    """DigestBackend that returns predictable values and records calls."""

    def __init__(self, algorithms=("md5", "sha256", "sha512"), variable=()):
        self.algorithms = set(algorithms)
        self.variable = set(variable)
        self.calls: list[tuple] = []

    def available_algorithms(self) -> set[str]:
        return set(self.algorithms)

    def is_variable_length(self, algorithm: str) -> bool:
        return algorithm in self.variable

    def digest(self, algorithm, data, raw_output=False, length=None):
        self.calls.append((algorithm, data, raw_output, length))
        if raw_output:
            return b"raw:" + data
        return f"{algorithm}:{data.decode('latin-1')}"


@pytest.fixture(autouse=True)
def reset_container():
    """Start and finish every test with an empty service container."""
    reset()
    yield
    reset()


@pytest.fixture
def backend_factory() -> type[FakeBackend]:
    return FakeBackend


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def generator() -> HashGenerator:
    return HashGenerator(HashlibBackend())


@pytest.fixture
def isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory with no config file and no HASHGEN_* env vars."""
    for name in list(os.environ):
        if name.startswith("HASHGEN_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
