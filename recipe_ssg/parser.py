"""
Parser for Markdown recipe documents.

A recipe document is ordinary Markdown in which each recipe begins with a
H1-level title and lists its ingredients and steps under ``## Ingredients``
and ``## Steps`` headings respectively::

    # Banana Bread

    ## Ingredients
    - 3 ripe bananas
    - 1 cup sugar

    ## Steps
    1. Mash bananas
    2. Bake at 350°F

Ingredients are bulleted (``- ``) list items and steps are numbered (``1. ``)
list items. Everything else (prose, blank lines, other sections such as
``## Notes``) is ignored. A single document may contain several recipes, one
per H1 title.

Parsing is line-based rather than a full Markdown parse: only lines starting
with exactly ``# `` or ``## `` are treated as headings and list items are
recognised by their (whitespace-stripped) prefix alone.

.. autofunction:: recipe_ssg.parser.parse_recipes

.. autofunction:: recipe_ssg.parser.parse_recipe
"""

from typing import List, Union

import re

from recipe_ssg.recipe import Recipe


TITLE_PREFIX = "# "
SECTION_PREFIX = "## "
INGREDIENT_PREFIX = "- "

INGREDIENTS_SECTION = "ingredients"
STEPS_SECTION = "steps"

STEP_PREFIX_REGEX = re.compile(r"^[0-9]+\.\s")
"""
Matches the ordinal at the start of a numbered list item (e.g. '12. '). Only
the first whitespace character after the period is part of the prefix.
"""


def parse_recipes(source: str) -> List[Recipe]:
    """
    Parse all of the recipes in a Markdown document.

    Returns
    =======
    recipes : [:py:class:`~recipe_ssg.recipe.Recipe`, ...]
        The recipes in the order they appear in the document. Recipes without
        any ingredients or steps are omitted so this list may be empty.
        Recipes appearing before the first H1 title (or in documents without
        one) will have an empty title.
    """
    recipes: List[Recipe] = []

    title = ""
    ingredients: List[str] = []
    steps: List[str] = []
    section = ""

    for line in source.split("\n"):
        if line.startswith(TITLE_PREFIX):
            if ingredients or steps:
                recipes.append(Recipe(title, ingredients, steps))
            title = line[len(TITLE_PREFIX) :].strip()
            ingredients = []
            steps = []
            section = ""
            continue

        if line.startswith(SECTION_PREFIX):
            section = line[len(SECTION_PREFIX) :].lower().strip()
            continue

        stripped = line.strip()
        if section == INGREDIENTS_SECTION and stripped.startswith(INGREDIENT_PREFIX):
            ingredients.append(stripped[len(INGREDIENT_PREFIX) :])
        elif section == STEPS_SECTION:
            match = STEP_PREFIX_REGEX.match(stripped)
            if match is not None:
                steps.append(stripped[match.end() :])

    if ingredients or steps:
        recipes.append(Recipe(title, ingredients, steps))

    return recipes


def parse_recipe(source: str) -> Union[Recipe, List[Recipe]]:
    """
    Like :py:func:`parse_recipes` but when the document contains exactly one
    recipe, that recipe is returned on its own rather than in a list.
    """
    recipes = parse_recipes(source)
    if len(recipes) == 1:
        return recipes[0]
    else:
        return recipes
