"""Shared fixtures for secure-randstr tests."""

from itertools import cycle

import pytest


class FixedEntropySource:
    """Deterministic entropy source replaying a fixed index sequence."""

    def __init__(self, indices):
        self.indices = list(indices)
        self._it = cycle(self.indices)
        self.calls = []

    def randbelow(self, n):
        self.calls.append(n)
        return next(self._it)


class FailingEntropySource:
    """Entropy source that fails after a number of successful draws."""

    def __init__(self, exc, succeed=0):
        self.exc = exc
        self.remaining = succeed

    def randbelow(self, n):
        if self.remaining <= 0:
            raise self.exc
        self.remaining -= 1
        return 0


@pytest.fixture
def fixed_source():
    return FixedEntropySource


@pytest.fixture
def failing_source():
    return FailingEntropySource


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the config file at a temporary directory."""
    path = tmp_path / "randstr-config"
    monkeypatch.setenv("RANDSTR_CONFIG_DIR", str(path))
    return path
