"""
Utilities for importing the recipes within a directory hierarchy.

Recipes may be arranged in a hierarchy of directories (for example) according
to categories and subcategories. All files with a ``.md`` extension are
assumed to be Markdown recipe documents (see :py:mod:`recipe_ssg.parser`)
containing one or more recipes.

Recipes without a H1 title are named after the file they were read from (see
:py:func:`filename_to_title`).
"""

from typing import Iterable, List, Union

from pathlib import Path

from dataclasses import replace

import logging
import os
import re

from recipe_ssg.recipe import Recipe

from recipe_ssg.parser import parse_recipes

from recipe_ssg.static_site.exceptions import (
    InputDirectoryNotFoundError,
    RecipeImportError,
)


logger = logging.getLogger(__name__)


MARKDOWN_SUFFIX = ".md"


def filename_to_title(filename: str) -> str:
    """
    Given a filename (without its extension) using hyphens or underscores
    between words, returns a title-cased rendering. For example
    "chocolate-cake" and "chocolate_cake" would both become "Chocolate Cake".

    Only the first letter of each word is changed; "BBQ-ribs" becomes
    "BBQ Ribs".
    """
    # Hyphens and underscores separate words
    filename = re.sub(r"[-_]", " ", filename)

    # Capitalise the first character of each word
    filename = re.sub(r"\b\w", lambda match: match.group(0).upper(), filename)

    return filename.strip()


def find_markdown_files(directory: Path) -> List[Path]:
    """
    Recursively find all Markdown (``*.md``) files within a directory.

    Files are listed in the order the filesystem enumerates them (i.e. not
    sorted), with the contents of each subdirectory listed at the point where
    that subdirectory is enumerated.

    Symbolic links (to files or directories) are skipped.
    """
    if not directory.is_dir():
        raise InputDirectoryNotFoundError(f"{directory} is not a directory")

    markdown_files: List[Path] = []
    for path in directory.iterdir():
        if path.is_symlink():
            continue
        elif path.is_dir():
            markdown_files.extend(find_markdown_files(path))
        elif path.is_file() and path.name.endswith(MARKDOWN_SUFFIX):
            markdown_files.append(path)

    return markdown_files


def import_recipes(recipe_source: Path) -> List[Recipe]:
    """
    Read and parse all of the recipes in a Markdown file.

    Recipes in the file without a title are given a title derived from the
    filename. All recipes have their :py:attr:`~recipe_ssg.recipe.Recipe.path`
    set to the path of the file, relative to the current working directory.

    Raises
    ======
    RecipeImportError
        If the file cannot be read or is not valid UTF-8.
    """
    logger.debug("Processing file: %s", recipe_source)
    try:
        with recipe_source.open(encoding="utf-8") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise RecipeImportError(
            f"Failed to import recipe {recipe_source}: {e}"
        ) from e

    name = recipe_source.name
    if name.endswith(MARKDOWN_SUFFIX):
        name = name[: -len(MARKDOWN_SUFFIX)]
    relative_path = os.path.relpath(recipe_source)

    recipes = [
        replace(
            recipe,
            title=recipe.title or filename_to_title(name),
            path=relative_path,
        )
        for recipe in parse_recipes(source)
    ]
    logger.debug("Found %d recipe(s) in %s", len(recipes), recipe_source)

    return recipes


def import_recipe(recipe_source: Path) -> Union[Recipe, List[Recipe]]:
    """
    Like :py:func:`import_recipes` except that when the file contains exactly
    one recipe, the recipe is returned on its own rather than in a list.
    """
    recipes = import_recipes(recipe_source)
    if len(recipes) == 1:
        return recipes[0]
    else:
        return recipes


def import_recipe_files(recipe_sources: Iterable[Path]) -> List[Recipe]:
    """
    Import the recipes from a series of Markdown files, returning all of the
    recipes found in file order.

    Files which cannot be imported are skipped with a warning logged.
    """
    recipes: List[Recipe] = []
    for recipe_source in recipe_sources:
        try:
            recipes.extend(import_recipes(recipe_source))
        except RecipeImportError as e:
            logger.warning("Skipping %s: %s", recipe_source, e)

    logger.debug("Total recipes found: %d", len(recipes))
    return recipes


def import_recipe_directory(directory: Path) -> List[Recipe]:
    """
    Import all of the recipes in the Markdown files within a directory
    hierarchy (see :py:func:`find_markdown_files` for the ordering).

    Raises
    ======
    InputDirectoryNotFoundError
        If the directory does not exist.
    """
    return import_recipe_files(find_markdown_files(directory))
