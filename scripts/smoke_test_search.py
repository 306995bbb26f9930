import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from recipebox.services.search_service import RecipeSearchService


def main() -> None:
    service = RecipeSearchService()
    print(f"recipes={len(service.engine.index)}")
    print(f"last_error={service.last_error}")
    for term in ["", "beef", "pork with", "notfound"]:
        recipes = service.search(term)
        print(f"query='{term}' recipes={len(recipes)}")
        for item in recipes[:3]:
            print(f"- {item.name} | rating={item.rating} | calories={item.calories} | file={item.file}")
        pick = service.pick_random(term)
        if pick.recipe is None:
            print(f"random -> {pick.notice}")
        else:
            print(f"random -> {pick.recipe.name} ({pick.url})")
        print("---")


if __name__ == "__main__":
    main()
