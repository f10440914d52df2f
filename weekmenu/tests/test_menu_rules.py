import unittest

from weekmenu.domain.errors import CompatibilityError, RecipeNotFoundError, ValidationError
from weekmenu.logic.rules.menu_rules import (
    resolve_recipes, validate_menu_compatibility, validate_menu_completeness, validate_people, validate_week,
)
from weekmenu.tests.helpers import FakeResolver, make_recipe, week_of


class TestWeekIdentifier(unittest.TestCase):

    def test_valid_weeks(self):
        for week in ("2024-W01", "2024-W10", "2024-W49", "2024-W53"):
            self.assertEqual(validate_week(week), week)

    def test_invalid_weeks(self):
        for week in ("2024-W54", "24-W01", "2024-W00", "2024-W1", "2024W01", "", None):
            with self.assertRaises(ValidationError):
                validate_week(week)


class TestHeadcount(unittest.TestCase):

    def test_boundaries(self):
        self.assertEqual(validate_people(1), 1)
        self.assertEqual(validate_people(20), 20)
        for bad in (0, 21, -3):
            with self.assertRaises(ValidationError) as ctx:
                validate_people(bad)
            self.assertEqual(ctx.exception.errors[0]["field"], "numberOfPeople")

    def test_non_integers_rejected(self):
        for bad in (2.5, "3", None, True):
            with self.assertRaises(ValidationError):
                validate_people(bad)


class TestCompleteness(unittest.TestCase):

    def test_full_week_passes(self):
        validate_menu_completeness(week_of(["a"]))

    def test_reports_every_missing_day(self):
        days = week_of(["a"])
        days["tuesday"] = []
        del days["sunday"]
        with self.assertRaises(ValidationError) as ctx:
            validate_menu_completeness(days)
        fields = [e["field"] for e in ctx.exception.errors]
        self.assertEqual(fields, ["days.tuesday", "days.sunday"])
        self.assertIn("tuesday, sunday", ctx.exception.message)

    def test_empty_mapping_reports_all_seven(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_menu_completeness({})
        self.assertEqual(len(ctx.exception.errors), 7)


class TestCompatibility(unittest.TestCase):

    def test_vegetarian_menu_with_meat_fails(self):
        recipes = [make_recipe("a"), make_recipe("b", is_vegetarian=False)]
        with self.assertRaises(CompatibilityError):
            validate_menu_compatibility("vegetarian", recipes)

    def test_vegetarian_menu_with_vegetarian_recipes_passes(self):
        validate_menu_compatibility("vegetarian", [make_recipe("a"), make_recipe("b")])

    def test_omnivore_menu_accepts_anything(self):
        validate_menu_compatibility("omnivore", [make_recipe("b", is_vegetarian=False)])


class TestResolveRecipes(unittest.TestCase):

    def test_single_batched_lookup_keeps_order_and_duplicates(self):
        resolver = FakeResolver([make_recipe("a"), make_recipe("b")])
        recipes = resolve_recipes(["b", "a", "b"], resolver)
        self.assertEqual([r.id for r in recipes], ["b", "a", "b"])
        self.assertEqual(resolver.calls, [["b", "a"]])

    def test_missing_and_inactive_ids_are_reported(self):
        inactive = make_recipe("c")
        inactive.active = False
        resolver = FakeResolver([make_recipe("a"), inactive])
        with self.assertRaises(RecipeNotFoundError) as ctx:
            resolve_recipes(["a", "x", "c"], resolver)
        self.assertEqual(ctx.exception.missing_ids, ["x", "c"])

    def test_no_ids_skips_lookup(self):
        resolver = FakeResolver([])
        self.assertEqual(resolve_recipes([], resolver), [])
        self.assertEqual(resolver.calls, [])
