class YmlGeneratorError(Exception):
    """Base for all errors"""


class WriterError(YmlGeneratorError):
    """If XML can't be written (bad nesting or broken sink)."""


class GenerationError(YmlGeneratorError):
    """If the feed generation failed, original error is in `__cause__`."""


class CatalogError(YmlGeneratorError):
    """If catalog file is malformed."""
