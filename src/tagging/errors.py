"""Errors raised by the tagging engine."""


class TaxonomyConfigError(ValueError):
    """Raised when taxonomy data is malformed (duplicate ids, empty keywords)."""
