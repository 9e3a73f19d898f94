"""
The ``recipe-ssg-site`` command generates a searchable recipe website from a
directory of Markdown recipe sources.

Given a directory containing a collection of recipes (as detailed below) the
static site generator is used like so::

    $ recipe-ssg-site INPUT_DIR OUTPUT_DIR

Generated websites are entirely static and may be browsed locally or hosted
using any static web hosting service.

Input directory structure
=========================

Recipes should be placed in Markdown files using a ``.md`` extension. These
may be placed in a single directory or organised into a hierarchy of
subdirectories; every ``.md`` file found is imported. Files which cannot be
read are skipped with a warning.

Each recipe should start with a H1-level title giving its name, followed by
``## Ingredients`` and ``## Steps`` sections::

    # Banana Bread

    ## Ingredients
    - 3 ripe bananas
    - 1 cup sugar

    ## Steps
    1. Mash bananas
    2. Bake at 350°F

A file may contain several recipes, each starting with its own title. When the
title is omitted, the recipe is named after its file (e.g.
``chocolate-cake.md`` becomes "Chocolate Cake").

Output
======

The output directory will contain an ``index.html`` page listing (and
allowing visitors to search) all of the recipes and a page for each recipe
named after its source file (e.g. ``banana-bread.html``). The index page
heading may be changed from the default using ``--title``.
"""

from typing import NoReturn

import logging
import os
import sys

from argparse import ArgumentParser

from pathlib import Path

from recipe_ssg import __version__

from recipe_ssg.static_site.exceptions import StaticSiteError

from recipe_ssg.static_site.recipe_directory import (
    find_markdown_files,
    import_recipe_files,
)

from recipe_ssg.static_site.website import DEFAULT_SITE_TITLE, export_site


class _ArgumentParser(ArgumentParser):
    """An ArgumentParser which exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _fail(message: str) -> NoReturn:
    sys.stderr.write(f"Error: {message}\n")
    sys.exit(1)


def main() -> None:
    parser = _ArgumentParser(
        description="""
            Compile a directory hierarchy of Markdown recipe files into a
            static recipe website.
        """,
    )

    parser.add_argument(
        "recipes",
        type=Path,
        help="""
            The directory containing the recipes.
        """,
    )
    parser.add_argument(
        "output",
        type=Path,
        help="""
            The directory to write the generated website to. Will be created if
            it does not exist. Should be empty. Files already in this directory
            may be overwritten silently.
        """,
    )

    parser.add_argument(
        "--title",
        "-t",
        default=DEFAULT_SITE_TITLE,
        help="""
            The heading of the index page. Default: %(default)s.
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="""
            Log details of each file processed.
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    input_directory = args.recipes.resolve()
    output_directory = args.output.resolve()

    if not input_directory.is_dir():
        _fail(f'Input directory "{input_directory}" does not exist')

    try:
        print(f"Scanning for recipes in {input_directory}...")
        recipe_sources = find_markdown_files(input_directory)
        if not recipe_sources:
            _fail(f'No markdown files found in "{input_directory}"')

        recipes = import_recipe_files(recipe_sources)
        if not recipes:
            _fail(f'No recipes found in "{input_directory}"')

        print(
            f"Found {len(recipes)} recipe(s) in "
            f"{len(recipe_sources)} markdown file(s) to process..."
        )

        index_path = export_site(recipes, output_directory, title=args.title)
    except (StaticSiteError, OSError) as e:
        _fail(str(e))

    print(f"Successfully generated site at: {output_directory}")
    print(f"Index page: {os.path.relpath(index_path)}")
    print(f"Generated {len(recipes)} recipe pages")


if __name__ == "__main__":
    main()
