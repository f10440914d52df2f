import pytest

from weekmenu.domain.errors import RecipeNotFoundError, ValidationError
from weekmenu.logic.shopping.list_builder import calculate_for_people, generate_shopping_list
from weekmenu.tests.helpers import FakeResolver, make_menu, make_recipe, week_of


@pytest.fixture
def resolver():
    return FakeResolver([
        make_recipe("a", ingredients=[("rice", 100, "g"), ("onion", 1, "pcs")]),
        make_recipe("b", ingredients=[("rice", 50, "g"), ("milk", 200, "ml")]),
        make_recipe("c", ingredients=[("rice", 1, "cup"), ("salt", 1, "pinch")]),
    ])


def test_same_name_and_unit_merge_across_recipes(resolver):
    # monday: rice 100 g + rice 50 g, headcount 2; other days use recipe c (rice in cups)
    menu = make_menu(week_of(["a", "b"], ["c"]))
    items = generate_shopping_list(menu, 2, resolver)
    rice_g = [i for i in items if i["name"] == "rice" and i["unit"] == "g"]
    assert rice_g == [{"name": "rice", "quantity": 300, "unit": "g"}]


def test_different_units_never_merge(resolver):
    menu = make_menu(week_of(["a"], ["c"]))
    items = generate_shopping_list(menu, 1, resolver)
    rice = [(i["quantity"], i["unit"]) for i in items if i["name"] == "rice"]
    assert rice == [(100, "g"), (6, "cup")]


def test_order_is_first_occurrence(resolver):
    menu = make_menu(week_of(["c", "b"], ["a"]))
    items = generate_shopping_list(menu, 1, resolver)
    assert [(i["name"], i["unit"]) for i in items] == [
        ("rice", "cup"), ("salt", "pinch"), ("rice", "g"), ("milk", "ml"), ("onion", "pcs"),
    ]


def test_recipe_on_several_days_counts_each_day(resolver):
    menu = make_menu(week_of(["a"]))
    items = generate_shopping_list(menu, 3, resolver)
    assert items[0] == {"name": "rice", "quantity": 100 * 3 * 7, "unit": "g"}
    assert items[1] == {"name": "onion", "quantity": 1 * 3 * 7, "unit": "pcs"}


def test_quantities_scale_linearly_with_headcount(resolver):
    menu = make_menu(week_of(["a", "b"], ["c", "a"]))
    base = {(i["name"], i["unit"]): i["quantity"] for i in generate_shopping_list(menu, 1, resolver)}
    for h1, h2 in ((1, 20), (2, 5), (4, 8), (3, 17)):
        q1 = {(i["name"], i["unit"]): i["quantity"] for i in generate_shopping_list(menu, h1, resolver)}
        q2 = {(i["name"], i["unit"]): i["quantity"] for i in generate_shopping_list(menu, h2, resolver)}
        assert q1.keys() == q2.keys() == base.keys()
        for key in q1:
            assert q2[key] * h1 == q1[key] * h2


def test_repeated_calls_are_identical(resolver):
    menu = make_menu(week_of(["a", "c"], ["b"]))
    assert generate_shopping_list(menu, 4, resolver) == generate_shopping_list(menu, 4, resolver)


@pytest.mark.parametrize("people", [0, 21, -1, 2.5])
def test_headcount_out_of_range_fails_before_lookup(resolver, people):
    with pytest.raises(ValidationError):
        generate_shopping_list(make_menu(week_of(["a"])), people, resolver)
    assert resolver.calls == []


@pytest.mark.parametrize("people", [1, 20])
def test_headcount_boundaries_succeed(resolver, people):
    items = generate_shopping_list(make_menu(week_of(["a"])), people, resolver)
    assert items[0]["quantity"] == 700 * people


def test_missing_recipe_blocks_the_list(resolver):
    with pytest.raises(RecipeNotFoundError):
        generate_shopping_list(make_menu(week_of(["a"], ["nope"])), 2, resolver)


def test_calculate_for_people_scales_ingredients_and_nutrition():
    recipe = make_recipe("a", ingredients=[("rice", 100, "g"), ("rice", 50, "g")], calories=400, fat=10)
    result = calculate_for_people(recipe, 3)
    # no merging in the single-recipe variant
    assert result["ingredients"] == [
        {"name": "rice", "quantity": 300, "unit": "g"},
        {"name": "rice", "quantity": 150, "unit": "g"},
    ]
    assert result["nutrition"]["calories"] == 1200
    assert result["nutrition"]["fat"] == 30
    assert recipe.ingredients[0].quantity == 100


def test_calculate_for_people_validates_headcount():
    with pytest.raises(ValidationError):
        calculate_for_people(make_recipe("a"), 21)
