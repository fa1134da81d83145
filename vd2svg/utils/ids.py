"""Document element id allocation."""

from __future__ import annotations


def unique_id(base: str, used_ids: set[str]) -> str:
    """Return ``base``, or ``base_1``, ``base_2``… if taken, and register it."""
    candidate = base
    suffix = 0
    while candidate in used_ids:
        suffix += 1
        candidate = f"{base}_{suffix}"

    used_ids.add(candidate)
    return candidate
