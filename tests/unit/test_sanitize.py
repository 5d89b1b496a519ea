from __future__ import annotations

import re

import pytest

from seavan.sanitize import is_safe, sanitize

SAFE = re.compile(r"^[a-z0-9_-]*$")

TRICKY = [
    "",
    "latest",
    "Some r4ndom t@g with character$",
    "README.md",
    "Cargo.toml",
    "a  b",
    "A@#B",
    "ÀB",
    "émoji 🚀 tag",
    "tab\tand\nnewline",
    "already-safe_name-01",
    "UPPER_CASE",
    "...",
]


@pytest.mark.parametrize("value", TRICKY)
def test_output_only_contains_allowed_characters(value: str) -> None:
    assert SAFE.match(sanitize(value))


@pytest.mark.parametrize("value", TRICKY)
def test_sanitize_is_idempotent(value: str) -> None:
    once = sanitize(value)
    assert sanitize(once) == once
    assert is_safe(once)


@pytest.mark.parametrize("value", ["latest", "abc123", "v1-2_3", ""])
def test_safe_input_is_unchanged(value: str) -> None:
    assert sanitize(value) == value


@pytest.mark.parametrize(
    "value,expected",
    [
        ("Some r4ndom t@g with character$", "some-r4ndom-t-g-with-character-"),
        ("README.md", "readme-md"),
        ("Cargo.toml", "cargo-toml"),
        # A multi-character disallowed run collapses to one hyphen.
        ("a  b", "a-b"),
        ("x@#$%y", "x-y"),
        # Uppercase letters inside a run are folded, the rest collapses around them.
        ("A@#B", "a-b"),
        ("ABC", "abc"),
        # Only ASCII A-Z is folded.
        ("ÀB", "-b"),
        ("É", "-"),
    ],
)
def test_known_values(value: str, expected: str) -> None:
    assert sanitize(value) == expected


def test_is_safe_rejects_uppercase() -> None:
    assert not is_safe("Latest")
