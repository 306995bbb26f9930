from __future__ import annotations


def tokenize(query: str | None) -> list[str]:
    """Split a query into case-folded search words. Blank input yields no words."""
    return [word.casefold() for word in (query or "").split()]
