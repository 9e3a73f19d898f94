"""
The ``recipe-ssg`` command compiles a single Markdown recipe into a
stand-alone HTML page.

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ recipe-ssg RECIPE_SOURCE [OUTPUT_FILENAME]

This will compile the recipe in the indicated markdown file. If no output
filename is given, the input filename with the suffix replaced with '.html' is
used.

The markdown file must contain exactly one recipe. Use ``recipe-ssg-site`` for
files containing several recipes.
"""

import sys

from argparse import ArgumentParser

from pathlib import Path

from recipe_ssg import __version__

from recipe_ssg.static_site.exceptions import StaticSiteError

from recipe_ssg.static_site.standalone_page import generate_standalone_page


def main() -> None:
    parser = ArgumentParser(
        description="""
            Compile a Markdown recipe file into a standalone HTML page.
        """,
    )

    parser.add_argument(
        "recipe",
        type=Path,
        help="""
            The filename of the Markdown recipe file to compile.
        """,
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="""
            The output filename for the generated HTML file. Defaults to the
            input filename with the extension replaced with .html if no name is
            given.
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args()

    try:
        html = generate_standalone_page(args.recipe)
    except StaticSiteError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    output = args.output
    if output is None:
        output = args.recipe.with_suffix(".html")

    with output.open("w", encoding="utf-8") as f:
        f.write(html)


if __name__ == "__main__":
    main()
