from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from recipebox.config import settings
from recipebox.schemas import RecipeInfo


class CatalogLoader:
    def __init__(self) -> None:
        self.path = Path(settings.catalog_path)
        self.debug = settings.debug_log
        self.last_error: str = ""
        self.skipped: int = 0

    def load(self, path: str | Path | None = None) -> dict[str, RecipeInfo]:
        self.last_error = ""
        self.skipped = 0
        source = Path(path) if path is not None else self.path

        try:
            raw: Any = json.loads(source.read_text(encoding="utf-8"))
        except FileNotFoundError:
            self.last_error = f"Recipe catalog not found: {source}"
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            self.last_error = f"Recipe catalog unreadable: {exc.__class__.__name__}"
            return {}
        except json.JSONDecodeError as exc:
            self.last_error = f"Recipe catalog is not valid JSON (line {exc.lineno})"
            return {}

        if isinstance(raw, dict):
            entries = list(raw.items())
        elif isinstance(raw, list):
            entries = [(None, item) for item in raw]
        else:
            self.last_error = f"Recipe catalog must be a JSON object or list, got {type(raw).__name__}"
            return {}

        catalog: dict[str, RecipeInfo] = {}
        for key, item in entries:
            try:
                recipe = RecipeInfo.model_validate(item)
            except ValidationError as exc:
                self.skipped += 1
                if self.debug:
                    print(f"[DEBUG][CATALOG] skipped key='{key}' errors={exc.error_count()}")
                continue
            recipe_key = key if key is not None else self._key_for(recipe)
            if recipe_key in catalog:
                # First record with a key wins.
                self.skipped += 1
                if self.debug:
                    print(f"[DEBUG][CATALOG] skipped duplicate key='{recipe_key}' name='{recipe.name}'")
                continue
            catalog[recipe_key] = recipe

        if self.debug:
            print(f"[DEBUG][CATALOG] path={source} recipes={len(catalog)} skipped={self.skipped}")
        if self.skipped:
            self.last_error = f"Skipped {self.skipped} invalid or duplicate recipe(s) in {source.name}"
        return catalog

    @staticmethod
    def _key_for(recipe: RecipeInfo) -> str:
        return Path(recipe.file).stem or recipe.name
