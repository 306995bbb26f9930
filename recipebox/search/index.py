from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from recipebox.schemas import RecipeInfo
from recipebox.search.query import tokenize


def matches(recipe: RecipeInfo, word: str) -> bool:
    """True if the case-folded word occurs in the name, headline or any ingredient name."""
    return (
        word in recipe.name.casefold()
        or word in recipe.headline.casefold()
        or any(word in ingredient.name.casefold() for ingredient in recipe.ingredients)
    )


class SearchIndex:
    """
    Keyword index over an immutable recipe catalog.
    Every query word must match (AND), each word may match any field (OR).
    """

    def __init__(self, data: Mapping[str, RecipeInfo]) -> None:
        self._data: Mapping[str, RecipeInfo] = MappingProxyType(dict(data))

    def __len__(self) -> int:
        return len(self._data)

    def keys(self) -> set[str]:
        return set(self._data)

    def find_keys(self, query: str | None) -> set[str]:
        words = tokenize(query)
        matching = set(self._data)
        for word in words:
            matching = {key for key in matching if matches(self._data[key], word)}
            if not matching:
                break
        return matching

    def search(self, query: str | None) -> list[RecipeInfo]:
        keys = self.find_keys(query)
        # Catalog order keeps a seeded random source reproducible.
        return [recipe for key, recipe in self._data.items() if key in keys]
