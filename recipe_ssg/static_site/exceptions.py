class StaticSiteError(Exception):
    """Base class for exceptions thrown during website generation."""


class InputDirectoryNotFoundError(StaticSiteError):
    """Thrown when the recipe directory given does not exist (or is not a directory)."""


class RecipeImportError(StaticSiteError):
    """Thrown when a recipe file could not be read."""


class RecipeNotFoundError(StaticSiteError):
    """Thrown when a file expected to contain a recipe does not contain any."""


class MultipleRecipesError(StaticSiteError):
    """Thrown when a file expected to contain one recipe contains several."""
