"""
The :py:mod:`recipe_ssg.recipe` module defines the data structure recipes are
parsed into.

A :py:class:`Recipe` is a flat record: a title, an ordered list of
ingredients and an ordered list of steps, each held as the (unformatted) text
which appeared in the Markdown source. Recipes read from a file additionally
record the path of that file.

Recipe attributes cannot be reassigned once constructed (the parser builds the
ingredient and step lists before creating each recipe). Since the lists
themselves are ordinary (mutable) lists, recipes are not hashable.

Use :py:func:`dataclasses.replace` to derive a modified copy (as
:py:func:`recipe_ssg.static_site.recipe_directory.import_recipes` does when
filling in a title and path).
"""

from typing import List, Optional

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Recipe:
    title: str
    """
    The recipe title. An empty string if the source did not contain a title
    heading.
    """

    ingredients: List[str] = field(default_factory=list)
    """The ingredients, in the order they appeared in the source."""

    steps: List[str] = field(default_factory=list)
    """The steps, in the order they appeared in the source."""

    path: Optional[str] = None
    """
    The path of the Markdown file this recipe was read from, relative to the
    working directory at the time it was imported. None for recipes which
    were not read from a file.
    """

    def __bool__(self) -> bool:
        """True if this recipe lists at least one ingredient or step."""
        return bool(self.ingredients) or bool(self.steps)
