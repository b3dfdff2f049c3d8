"""Substring filtering of descriptor sections and of the API list."""

from typing import TypeVar

T = TypeVar("T")


def filter_entries(entries: dict[str, T], needle: str) -> dict[str, T]:
    """Return a copy of `entries` keeping only keys that contain `needle`.

    Matching is case-sensitive. The input mapping is left untouched.
    """
    return {key: value for key, value in entries.items() if needle in key}


def filter_api_list(names: list[str], needle: str | None) -> list[str]:
    """Case-insensitive filter over API entry names, preserving order."""
    if not needle:
        return list(names)
    needle = needle.lower()
    return [name for name in names if needle in name.lower()]
