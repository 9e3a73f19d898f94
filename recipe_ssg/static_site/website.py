"""
Static recipe website site generator.

URL Scheme
==========

The generated website is flat, with all pages in the output directory:

* ``index.html``: The index page listing every recipe, with a search box which
  filters the list by title as the visitor types.
* ``<slug>.html``: A page for each recipe, named after the Markdown file the
  recipe was read from (see :py:func:`recipe_output_filename`).

Page stylesheets are embedded in each page so the site has no other files.
"""

from typing import List, NamedTuple, Optional, Sequence, Set

from pathlib import Path

import re

from recipe_ssg.recipe import Recipe

from recipe_ssg.static_site.templates import (
    index_template,
    recipe_template,
)


INDEX_FILENAME = "index.html"
"""The filename of the index page in the generated website."""

DEFAULT_SITE_TITLE = "Recipe Collection"
"""The heading used on the index page when no other is given."""


class IndexEntry(NamedTuple):
    title: str
    """The recipe title, as shown in the index."""

    href: str
    """Link to the recipe page, relative to the index page."""


def render_recipe_page(
    recipe: Recipe, index_href: Optional[str] = INDEX_FILENAME
) -> str:
    """
    Render a complete HTML page for a single recipe.

    Parameters
    ==========
    recipe : Recipe
        The recipe to render.
    index_href : str or None
        The (relative) URL of the index page to link back to. If None, the
        back link is omitted (e.g. for standalone pages).
    """
    return recipe_template.render(
        title=recipe.title,
        ingredients=recipe.ingredients,
        steps=recipe.steps,
        index_href=index_href,
    )


def render_index_page(
    entries: Sequence[IndexEntry], title: str = DEFAULT_SITE_TITLE
) -> str:
    """
    Render the index page listing the provided recipes in the order given.
    """
    return index_template.render(
        title=title,
        recipes=list(entries),
    )


def recipe_output_filename(recipe_path: str) -> str:
    """
    Get the filename of the page generated for a recipe read from the named
    Markdown file.

    Example::

        >>> recipe_output_filename("desserts/Chocolate Cake.md")
        "chocolate-cake.html"
    """
    name = Path(recipe_path).name
    if name.endswith(".md"):
        name = name[: -len(".md")]
    return re.sub(r"[^a-z0-9]+", "-", name.lower()) + ".html"


def _unique_filename(filename: str, used_filenames: Set[str]) -> str:
    """
    Return filename, with a '-2', '-3', etc. suffix added to the stem if it
    is already in used_filenames. The returned name is added to the set.
    """
    candidate = filename
    stem, dot, suffix = filename.rpartition(".")
    n = 1
    while candidate in used_filenames or candidate == INDEX_FILENAME:
        n += 1
        candidate = f"{stem}-{n}{dot}{suffix}"
    used_filenames.add(candidate)
    return candidate


def export_recipe(
    recipe: Recipe,
    output_path: Path,
    index_href: Optional[str] = INDEX_FILENAME,
) -> Path:
    """
    Write a recipe's page to the given filename, replacing any existing file.
    Returns the output path.
    """
    with output_path.open("w", encoding="utf-8") as f:
        f.write(render_recipe_page(recipe, index_href=index_href))
    return output_path


def export_site(
    recipes: Sequence[Recipe],
    output_directory: Path,
    title: str = DEFAULT_SITE_TITLE,
) -> Path:
    """
    Generate a static recipe website.

    Parameters
    ==========
    recipes : [Recipe, ...]
        The recipes to include, in the order they should be listed on the
        index page. Recipes are expected to have their
        :py:attr:`~recipe_ssg.recipe.Recipe.path` set; recipes without one are
        named after their title instead.
    output_directory : Path
        The directory to write the generated pages. Will be created if it does
        not exist. Should ideally be empty but if not, existing files will be
        clobbered without warning.
    title : str
        The heading for the index page.

    Returns
    =======
    Path
        The path of the generated index page.
    """
    output_directory.mkdir(parents=True, exist_ok=True)

    entries: List[IndexEntry] = []
    used_filenames: Set[str] = set()
    for recipe in recipes:
        filename = _unique_filename(
            recipe_output_filename(
                recipe.path if recipe.path is not None else recipe.title
            ),
            used_filenames,
        )
        export_recipe(recipe, output_directory / filename)
        entries.append(IndexEntry(title=recipe.title, href=filename))

    index_path = output_directory / INDEX_FILENAME
    with index_path.open("w", encoding="utf-8") as f:
        f.write(render_index_page(entries, title=title))

    return index_path
