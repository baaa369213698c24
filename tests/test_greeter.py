"""Greeter entity stories: message text, stdout output, idempotence."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from greeter.domain.greeter import DEFAULT_NAME, RUNTIME_LABEL, Greeter


@pytest.mark.os_agnostic
def test_greeting_world_writes_canonical_line_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """Greeter("World").greet() prints exactly the canonical line."""
    Greeter("World").greet()

    captured = capsys.readouterr()
    assert captured.out == "Hello, World from Go!\n"
    assert captured.err == ""


@pytest.mark.os_agnostic
def test_empty_name_is_greeted_verbatim(capsys: pytest.CaptureFixture[str]) -> None:
    """An empty name is accepted and leaves a double space in the line."""
    Greeter("").greet()

    assert capsys.readouterr().out == "Hello,  from Go!\n"


@pytest.mark.os_agnostic
def test_greeting_twice_writes_identical_lines(capsys: pytest.CaptureFixture[str]) -> None:
    """Two greet calls write the same line twice and leave the instance unchanged."""
    greeter = Greeter("World")
    before = dataclasses.asdict(greeter)

    greeter.greet()
    greeter.greet()

    assert capsys.readouterr().out == "Hello, World from Go!\n" * 2
    assert dataclasses.asdict(greeter) == before


@pytest.mark.os_agnostic
def test_greet_sends_message_to_supplied_writer(capsys: pytest.CaptureFixture[str]) -> None:
    """A supplied writer receives the line without newline; stdout stays empty."""
    lines: list[str] = []

    Greeter("Ada", runtime_label="Python").greet(lines.append)

    assert lines == ["Hello, Ada from Python!"]
    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_greet_propagates_writer_failure() -> None:
    """An output failure is not swallowed."""

    def broken(_line: str) -> None:
        raise BrokenPipeError("stdout closed")

    with pytest.raises(BrokenPipeError, match="stdout closed"):
        Greeter("World").greet(broken)


@pytest.mark.os_agnostic
def test_name_with_braces_is_not_treated_as_template() -> None:
    """Format placeholders inside the name are printed literally."""
    assert Greeter("{runtime_label}").message() == "Hello, {runtime_label} from Go!"


@pytest.mark.os_agnostic
def test_greeter_is_immutable() -> None:
    """The stored name cannot be reassigned after construction."""
    greeter = Greeter("World")

    with pytest.raises(dataclasses.FrozenInstanceError):
        greeter.name = "Ada"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_defaults_match_canonical_values() -> None:
    """Default name and runtime label reproduce the canonical greeting."""
    assert DEFAULT_NAME == "World"
    assert RUNTIME_LABEL == "Go"
    assert Greeter(DEFAULT_NAME).runtime_label == "Go"


@pytest.mark.os_agnostic
@given(name=st.text())
def test_any_name_produces_hello_name_from_go(name: str) -> None:
    """For every text X the written line is 'Hello, X from Go!'."""
    lines: list[str] = []

    Greeter(name).greet(lines.append)

    assert lines == [f"Hello, {name} from Go!"]
