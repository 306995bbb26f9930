from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote

from recipebox.config import settings
from recipebox.data_providers.catalog_loader import CatalogLoader
from recipebox.schemas import RandomPick, RecipeInfo
from recipebox.search.engine import RandomSource, SearchEngine

NO_MATCH_NOTICE = "Kein passendes Rezept gefunden"
NO_RESULTS_TEXT = "Keine Rezepte gefunden."


class RecipeSearchService:
    def __init__(
        self,
        catalog: Mapping[str, RecipeInfo] | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.debug = settings.debug_log
        self.url_prefix = settings.recipe_url_prefix
        self.last_error = ""
        if catalog is None:
            loader = CatalogLoader()
            catalog = loader.load()
            self.last_error = loader.last_error
        self.engine = SearchEngine(catalog, rng=rng)
        if self.debug:
            print(f"[DEBUG][SERVICE] recipes={len(self.engine.index)} last_error='{self.last_error}'")

    def search(self, query: str | None) -> list[RecipeInfo]:
        return self.engine.search(query)

    def recipe_url(self, recipe: RecipeInfo) -> str:
        return f"{self.url_prefix}{quote(recipe.file)}"

    def render_results(self, query: str | None) -> str:
        recipes = self.search(query)
        if not recipes:
            return NO_RESULTS_TEXT
        return "\n\n".join(self._render_recipe(recipe) for recipe in recipes)

    def pick_random(self, query: str | None) -> RandomPick:
        recipe = self.engine.random(query)
        if recipe is None:
            if self.debug:
                print(f"[DEBUG][SERVICE] random no match query='{query}'")
            return RandomPick(notice=NO_MATCH_NOTICE)
        return RandomPick(recipe=recipe, url=self.recipe_url(recipe))

    def _render_recipe(self, recipe: RecipeInfo) -> str:
        rating = f"{recipe.rating:g} ★" if recipe.rating is not None else "ohne Bewertung"
        lines = [f"### [{recipe.name}]({self.recipe_url(recipe)}) · {rating}"]
        if recipe.headline:
            lines.append(f"_{recipe.headline}_")
        if recipe.calories is not None:
            lines.append(f"{recipe.calories:g} Kalorien")
        for ingredient in recipe.ingredients:
            quantity = f"{ingredient.quantity} " if ingredient.quantity else ""
            lines.append(f"- {quantity}{ingredient.name}")
        return "\n".join(lines)
