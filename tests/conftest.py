# topmark:header:start
#
#   project      : NPrint
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the NPrint test suite.

Notes:
    Tests should respect the immutable/mutable configuration split: build a
    `nprint.config.model.MutableConfig`, then `freeze()` it into a `Config`.
    Never mutate a frozen `Config`; call `Config.thaw()` instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from nprint.config import logging
from nprint.config.model import Config, MutableConfig
from nprint.runtime import Runtime

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_nprint_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure neither the log level nor the runtime is forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv("NPRINT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NPRINT_RUNTIME", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Route NPrint logging through the project handler at TRACE level."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


class FakeChalk:
    """Stand-in for the `yachalk` factory producing readable, deterministic markers.

    ``factory.red("x")`` returns ``"<red>x</red>"``; ``factory.hex("#ff0000")("x")``
    returns ``"<hex #ff0000>x</hex>"``.
    """

    def __getattr__(self, name: str) -> Callable[..., str]:
        if name in ("hex", "bg_hex"):
            return lambda literal: self._wrapper(f"{name} {literal}", name)
        return self._wrapper(name, name)

    @staticmethod
    def _wrapper(opening: str, closing: str) -> Callable[..., str]:
        def _apply(*args: object, sep: str = " ") -> str:
            return f"<{opening}>{sep.join(str(a) for a in args)}</{closing}>"

        return _apply


@pytest.fixture
def fake_chalk() -> FakeChalk:
    """Return a deterministic chalk factory."""
    return FakeChalk()


def fixed_runtime(runtime: Runtime) -> Callable[[], Runtime]:
    """Return a detector that always reports ``runtime``."""
    return lambda: runtime


class CountingDetector:
    """Runtime detector recording how often it is queried."""

    def __init__(self, runtime: Runtime) -> None:
        self.runtime = runtime
        self.calls = 0

    def __call__(self) -> Runtime:
        self.calls += 1
        return self.runtime


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and field overrides."""
    draft = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()
