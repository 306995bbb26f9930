from __future__ import annotations

import random
import unicodedata
from collections.abc import Mapping
from typing import Protocol, Sequence, TypeVar

from recipebox.config import settings
from recipebox.schemas import RecipeInfo
from recipebox.search.index import SearchIndex

T = TypeVar("T")


class RandomSource(Protocol):
    def choice(self, seq: Sequence[T]) -> T: ...


def collation_key(name: str) -> tuple[str, str]:
    # Accents and case only decide between otherwise equal names.
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name


def sort_key(recipe: RecipeInfo) -> tuple[int, float, tuple[str, str]]:
    """Rating descending with unrated recipes last, then name ascending."""
    if recipe.rating is None:
        return 1, 0.0, collation_key(recipe.name)
    return 0, -recipe.rating, collation_key(recipe.name)


class SearchEngine:
    def __init__(self, data: Mapping[str, RecipeInfo], rng: RandomSource | None = None) -> None:
        self.index = SearchIndex(data)
        self.rng = rng if rng is not None else random.Random()
        self.debug = settings.debug_log

    def search(self, query: str | None) -> list[RecipeInfo]:
        results = sorted(self.index.search(query), key=sort_key)
        if self.debug:
            print(f"[DEBUG][ENGINE] search query='{query}' results={len(results)}")
        return results

    def random(self, query: str | None) -> RecipeInfo | None:
        results = self.index.search(query)
        if not results:
            if self.debug:
                print(f"[DEBUG][ENGINE] random query='{query}' no match")
            return None
        picked = self.rng.choice(results)
        if self.debug:
            print(f"[DEBUG][ENGINE] random query='{query}' candidates={len(results)} picked='{picked.name}'")
        return picked
