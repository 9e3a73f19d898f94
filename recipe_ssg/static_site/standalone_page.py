"""
Generates a stand alone HTML page for a single recipe.
"""

from pathlib import Path

from recipe_ssg.static_site.exceptions import (
    RecipeNotFoundError,
    MultipleRecipesError,
)

from recipe_ssg.static_site.recipe_directory import import_recipes

from recipe_ssg.static_site.website import render_recipe_page


def generate_standalone_page(input_file: Path) -> str:
    """
    Generate a standalone page for the recipe in a Markdown file. The page
    has no link back to an index page.

    Raises
    ======
    RecipeImportError
        If the file could not be read.
    RecipeNotFoundError
        If the file contains no recipes.
    MultipleRecipesError
        If the file contains more than one recipe.
    """
    recipes = import_recipes(input_file)

    if not recipes:
        raise RecipeNotFoundError(
            f"{input_file} does not contain a recipe (no ingredients or steps found)"
        )
    if len(recipes) > 1:
        raise MultipleRecipesError(
            f"{input_file} contains {len(recipes)} recipes; "
            f"use recipe-ssg-site to generate a page for each"
        )

    return render_recipe_page(recipes[0], index_href=None)
