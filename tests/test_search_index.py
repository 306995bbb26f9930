from recipebox.schemas import Ingredient, RecipeInfo
from recipebox.search.index import SearchIndex
from recipebox.search.query import tokenize


def _index() -> SearchIndex:
    return SearchIndex(
        {
            "Stew": RecipeInfo(
                name="Stew",
                headline="with meat and veggies",
                file="Stew.pdf",
                rating=4.0,
                calories=800,
                ingredients=[Ingredient(name="beef", quantity="500 g")],
            ),
            "Steak": RecipeInfo(
                name="Steak",
                headline="juicy beefy",
                file="Steak.pdf",
                rating=3.0,
                calories=800,
                ingredients=[Ingredient(name="beef", quantity="500 g")],
            ),
        }
    )


def test_tokenize_splits_on_whitespace_and_casefolds():
    assert tokenize("  Beef\tVEGGIES\n stew ") == ["beef", "veggies", "stew"]
    assert tokenize("   ") == []
    assert tokenize(None) == []


def test_find_keys_by_name():
    assert _index().find_keys("Stew") == {"Stew"}


def test_empty_query_returns_all_keys():
    assert _index().find_keys("") == {"Steak", "Stew"}


def test_whitespace_query_returns_all_keys():
    assert _index().find_keys("     ") == {"Steak", "Stew"}


def test_unknown_word_returns_empty_set():
    assert _index().find_keys("Tacos") == set()


def test_name_match_is_case_insensitive():
    index = _index()
    assert index.find_keys("stew") == {"Stew"}
    assert index.find_keys("STEW") == {"Stew"}


def test_partial_word_matches():
    assert _index().find_keys("tew") == {"Stew"}


def test_headline_match_is_case_insensitive():
    assert _index().find_keys("VEGGIES") == {"Stew"}


def test_ingredient_match_is_case_insensitive():
    assert _index().find_keys("BeEf") == {"Stew", "Steak"}


def test_all_words_must_match():
    assert _index().find_keys("beef veggies") == {"Stew"}


def test_words_may_match_different_fields():
    index = SearchIndex(
        {
            "curry": RecipeInfo(
                name="Green Curry",
                headline="spicy",
                ingredients=[Ingredient(name="coconut milk", quantity="400 ml")],
            )
        }
    )
    assert index.find_keys("green coconut") == {"curry"}
    assert index.find_keys("green tomato") == set()


def test_quantity_is_not_searchable():
    assert _index().find_keys("500") == set()


def test_search_returns_full_recipes():
    recipes = _index().search("beef veggies")
    assert len(recipes) == 1
    assert recipes[0].name == "Stew"
    assert recipes[0].file == "Stew.pdf"


def test_repeated_queries_return_the_same_keys():
    index = _index()
    assert index.find_keys("beef") == index.find_keys("beef")


def test_index_is_isolated_from_later_catalog_changes():
    data = {"Stew": RecipeInfo(name="Stew", headline="hearty")}
    index = SearchIndex(data)
    data["Soup"] = RecipeInfo(name="Soup", headline="hearty")
    assert index.find_keys("hearty") == {"Stew"}
    assert len(index) == 1
    assert index.keys() == {"Stew"}


def test_empty_catalog_yields_empty_results():
    index = SearchIndex({})
    assert index.find_keys("") == set()
    assert index.search("beef") == []
