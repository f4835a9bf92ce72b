"""
Source loading service.

This module resolves a (SourceKind, FormatKind) pair and a path or URL into
raw feed text, and from there into the matching parser. Read failures are
raised as SourceLoadError; they are not swallowed here.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import requests

from article_parser.exceptions import SourceLoadError, UnsupportedSourceFormatError
from article_parser.parsers import ArticleParser, FormatKind, create_parser

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10

# Only CR, LF and CRLF end a line; other Unicode separators are article text
LINE_BREAK = re.compile(r"\r\n|\r|\n")


class SourceKind(Enum):
    """Where raw text comes from."""

    FILE = "file"
    URL = "url"


@dataclass(frozen=True)
class SourceFormat:
    """A source kind paired with the format of the text it yields."""

    source: SourceKind
    format: FormatKind

    def check_supported(self) -> None:
        """Raises UnsupportedSourceFormatError for pairings the loader rejects."""
        if self.source is SourceKind.URL and self.format is FormatKind.SIMPLE:
            raise UnsupportedSourceFormatError(
                "Unsupported combination: SIMPLE format cannot be fetched from a URL"
            )


def read_file(path: str) -> str:
    """Reads a whole file as text, keeping its line breaks as written."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceLoadError(f"Could not read file {path!r}: {e}") from e


def fetch_url(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Fetches a URL and returns its body with line breaks removed."""
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
        body = resp.text
    except requests.RequestException as e:
        raise SourceLoadError(f"Could not fetch {url!r}: {e}") from e
    return LINE_BREAK.sub("", body)


def load_data(
    source_format: SourceFormat, location: str, timeout: float = DEFAULT_TIMEOUT
) -> str:
    """Loads raw text from the file path or URL described by `source_format`."""
    source_format.check_supported()
    if source_format.source is SourceKind.URL:
        logger.info("Fetching %s feed from URL.", source_format.format.value)
        return fetch_url(location, timeout=timeout)
    logger.info("Reading %s feed from %s.", source_format.format.value, location)
    return read_file(location)


def load_parser(
    source_format: SourceFormat,
    location: str,
    timeout: float = DEFAULT_TIMEOUT,
    log: Optional[logging.Logger] = None,
) -> ArticleParser:
    """Loads raw text and wraps it in the parser for its format."""
    text = load_data(source_format, location, timeout=timeout)
    return create_parser(source_format.format, text, log)
