"""Small text helpers for notification bodies."""

from __future__ import annotations

_ELLIPSIS = "..."


def shorten_string(text: str, *, keep: int = 6) -> str:
    """Collapse the middle of a long identifier: ``tz1VSU...p4mR5G``.

    Strings no longer than ``2 * keep`` are returned unchanged.
    """
    if len(text) <= keep * 2:
        return text
    return f"{text[:keep]}{_ELLIPSIS}{text[-keep:]}"
