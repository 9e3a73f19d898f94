import pytest

from textwrap import dedent

from recipe_ssg.recipe import Recipe

from recipe_ssg.parser import parse_recipes, parse_recipe


BANANA_BREAD = dedent(
    """
    # Banana Bread
    ## Ingredients
    - 3 ripe bananas
    - 1 cup sugar
    ## Steps
    1. Mash bananas
    2. Bake at 350°F
    """
).lstrip()


class TestParseRecipes:
    def test_single_recipe(self) -> None:
        assert parse_recipes(BANANA_BREAD) == [
            Recipe(
                title="Banana Bread",
                ingredients=["3 ripe bananas", "1 cup sugar"],
                steps=["Mash bananas", "Bake at 350°F"],
            )
        ]

    @pytest.mark.parametrize(
        "source",
        [
            # Empty
            "",
            # Title only
            "# Nothing here",
            # Sections but no items
            "# Nothing here\n## Ingredients\n## Steps\n",
            # Prose only
            "Just some words.\nAnd more.",
        ],
    )
    def test_no_recipes(self, source: str) -> None:
        assert parse_recipes(source) == []

    def test_multiple_recipes(self) -> None:
        source = dedent(
            """
            # Toast
            ## Ingredients
            - Bread
            ## Steps
            1. Toast it

            # Tea
            ## Steps
            1. Boil water
            2. Brew

            # Jam
            ## Ingredients
            - Fruit
            - Sugar
            """
        )
        assert parse_recipes(source) == [
            Recipe(title="Toast", ingredients=["Bread"], steps=["Toast it"]),
            Recipe(title="Tea", ingredients=[], steps=["Boil water", "Brew"]),
            Recipe(title="Jam", ingredients=["Fruit", "Sugar"], steps=[]),
        ]

    def test_empty_recipes_skipped(self) -> None:
        source = dedent(
            """
            # Empty
            Nothing to see.
            # Full
            ## Steps
            1. Do it
            # Also empty
            """
        )
        assert parse_recipes(source) == [Recipe(title="Full", steps=["Do it"])]

    def test_no_title(self) -> None:
        source = "## Ingredients\n- Egg\n## Steps\n1. Boil\n"
        assert parse_recipes(source) == [
            Recipe(title="", ingredients=["Egg"], steps=["Boil"])
        ]

    def test_content_before_first_title(self) -> None:
        source = dedent(
            """
            ## Steps
            1. Untitled step
            # Titled
            ## Steps
            1. Titled step
            """
        )
        assert parse_recipes(source) == [
            Recipe(title="", steps=["Untitled step"]),
            Recipe(title="Titled", steps=["Titled step"]),
        ]

    def test_title_stripped(self) -> None:
        (recipe,) = parse_recipes("#   Spaced out  \n## Steps\n1. Go\n")
        assert recipe.title == "Spaced out"

    def test_items_before_any_section_dropped(self) -> None:
        source = dedent(
            """
            # Soup
            - Stray ingredient
            1. Stray step
            ## Ingredients
            - Stock
            """
        )
        assert parse_recipes(source) == [Recipe(title="Soup", ingredients=["Stock"])]

    def test_section_reset_by_title(self) -> None:
        source = dedent(
            """
            # First
            ## Ingredients
            - Flour
            # Second
            - Not an ingredient
            ## Steps
            1. Stir
            """
        )
        assert parse_recipes(source) == [
            Recipe(title="First", ingredients=["Flour"]),
            Recipe(title="Second", steps=["Stir"]),
        ]

    @pytest.mark.parametrize(
        "header, is_ingredients",
        [
            ("## Ingredients", True),
            ("## ingredients", True),
            ("## INGREDIENTS", True),
            ("## Ingredients  ", True),
            ("## Ingredient List", False),
            ("## Ingredient", False),
            ("### Ingredients", False),
            ("##Ingredients", False),
            ("# Ingredients", False),
        ],
    )
    def test_section_matching(self, header: str, is_ingredients: bool) -> None:
        recipes = parse_recipes(f"# Test\n{header}\n- Salt\n")
        if is_ingredients:
            assert recipes == [Recipe(title="Test", ingredients=["Salt"])]
        else:
            assert all(recipe.ingredients == [] for recipe in recipes)

    def test_unknown_sections_ignored(self) -> None:
        source = dedent(
            """
            # Pie
            ## Ingredients
            - Apples
            ## Notes
            - Serve warm
            1. Really warm
            ## Steps
            1. Bake
            """
        )
        assert parse_recipes(source) == [
            Recipe(title="Pie", ingredients=["Apples"], steps=["Bake"])
        ]

    @pytest.mark.parametrize(
        "line, exp",
        [
            ("- Salt", "Salt"),
            ("   - Indented salt  ", "Indented salt"),
            ("-  Extra space", " Extra space"),
            ("- **Bold** salt", "**Bold** salt"),
            ("- <em>Salt</em> & pepper", "<em>Salt</em> & pepper"),
            ("- 1-2 tsp salt - to taste", "1-2 tsp salt - to taste"),
        ],
    )
    def test_ingredient_text(self, line: str, exp: str) -> None:
        (recipe,) = parse_recipes(f"# T\n## Ingredients\n{line}\n")
        assert recipe.ingredients == [exp]

    @pytest.mark.parametrize(
        "line",
        ["-Salt", "* Salt", "+ Salt", "Salt", "-"],
    )
    def test_non_ingredient_lines(self, line: str) -> None:
        assert parse_recipes(f"# T\n## Ingredients\n{line}\n") == []

    @pytest.mark.parametrize(
        "line, exp",
        [
            ("1. Mix", "Mix"),
            ("12. Mix", "Mix"),
            ("  3. Indented  ", "Indented"),
            ("1.   Lots of space", "  Lots of space"),
            ("1.\t Tab then space", " Tab then space"),
            ("1.\tTabbed", "Tabbed"),
            ("1. Heat to 2. setting", "Heat to 2. setting"),
            ("1. Add *all* the [things](x.md)", "Add *all* the [things](x.md)"),
        ],
    )
    def test_step_text(self, line: str, exp: str) -> None:
        (recipe,) = parse_recipes(f"# T\n## Steps\n{line}\n")
        assert recipe.steps == [exp]

    @pytest.mark.parametrize(
        "line",
        ["1.Mix", "1) Mix", "a. Mix", "- Mix", "Mix", "1."],
    )
    def test_non_step_lines(self, line: str) -> None:
        assert parse_recipes(f"# T\n## Steps\n{line}\n") == []

    def test_list_kinds_are_section_specific(self) -> None:
        source = dedent(
            """
            # T
            ## Ingredients
            1. Numbered ingredient
            - Bulleted ingredient
            ## Steps
            - Bulleted step
            1. Numbered step
            """
        )
        assert parse_recipes(source) == [
            Recipe(
                title="T",
                ingredients=["Bulleted ingredient"],
                steps=["Numbered step"],
            )
        ]

    def test_windows_line_endings(self) -> None:
        (recipe,) = parse_recipes(BANANA_BREAD.replace("\n", "\r\n"))
        assert recipe == Recipe(
            title="Banana Bread",
            ingredients=["3 ripe bananas", "1 cup sugar"],
            steps=["Mash bananas", "Bake at 350°F"],
        )

    def test_idempotent(self) -> None:
        assert parse_recipes(BANANA_BREAD) == parse_recipes(BANANA_BREAD)

    def test_recipes_do_not_share_lists(self) -> None:
        first, second = parse_recipes("# A\n## Steps\n1. a\n# B\n## Steps\n1. b\n")
        assert first.steps == ["a"]
        assert second.steps == ["b"]
        assert first.steps is not second.steps


class TestParseRecipe:
    def test_single_recipe_unwrapped(self) -> None:
        recipe = parse_recipe(BANANA_BREAD)
        assert isinstance(recipe, Recipe)
        assert recipe.title == "Banana Bread"

    def test_multiple_recipes_list(self) -> None:
        nut_bread = BANANA_BREAD.replace("Banana", "Nut")
        recipes = parse_recipe(BANANA_BREAD + "\n" + nut_bread)
        assert isinstance(recipes, list)
        assert [r.title for r in recipes] == ["Banana Bread", "Nut Bread"]

    def test_no_recipes_list(self) -> None:
        assert parse_recipe("") == []
