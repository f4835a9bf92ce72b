class ArticleParserError(Exception):
    """Base class for errors raised by article_parser."""


class DecodeError(ArticleParserError):
    """Raised when raw text cannot be decoded into the expected feed shape."""


class SourceLoadError(ArticleParserError):
    """Raised when a file or URL cannot be read."""


class UnsupportedSourceFormatError(ArticleParserError, ValueError):
    """Raised for a source/format pairing the loader does not support."""
