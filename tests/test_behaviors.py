"""Behaviour-layer stories: pure domain function tests."""

from __future__ import annotations

import pytest

from greeter.domain import behaviors


@pytest.mark.os_agnostic
def test_build_greeting_returns_canonical_text() -> None:
    """build_greeting() without arguments returns the canonical greeting."""
    assert behaviors.build_greeting() == "Hello, World from Go!"


@pytest.mark.os_agnostic
def test_canonical_greeting_constant_matches_builder() -> None:
    """CANONICAL_GREETING and build_greeting() agree."""
    assert behaviors.CANONICAL_GREETING == behaviors.build_greeting()


@pytest.mark.os_agnostic
def test_build_greeting_uses_given_name_and_label() -> None:
    """Explicit name and label are interpolated."""
    assert behaviors.build_greeting("Ada", runtime_label="Python") == "Hello, Ada from Python!"
