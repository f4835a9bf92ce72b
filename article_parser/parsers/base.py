"""
Base classes and shared routines for article parsers.

Every parser carries a FormatKind tag and the raw text it wraps. Decoding is
format specific; filtering the decoded articles through the validator is the
same for every format and lives in parse_articles().
"""

import json
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional

from article_parser.exceptions import DecodeError
from article_parser.models import Article
from article_parser.validator import invalid_field_names, is_valid

if TYPE_CHECKING:
    from article_parser.visitor import ParserVisitor

logger = logging.getLogger(__name__)


class FormatKind(Enum):
    """Shape of the raw text a parser understands."""

    SIMPLE = "simple"
    NEWSAPI = "newsapi"


def load_json(text: str) -> Any:
    """Decodes JSON text, raising DecodeError on malformed input."""
    try:
        return json.loads(text)
    except (ValueError, TypeError, RecursionError) as e:
        raise DecodeError(str(e)) from e


class ArticleParser(ABC):
    """
    Base class for feed parsers.

    Subclasses set `format_kind` and implement `decode`, which turns the raw
    text into articles (valid or not) or raises DecodeError.
    """

    format_kind: FormatKind

    def __init__(self, text: str, log: Optional[logging.Logger] = None):
        self.text = text
        self.logger = log or logger

    @abstractmethod
    def decode(self) -> List[Article]:
        """Decodes the raw text into articles without validating them."""

    def parse(self) -> List[Article]:
        """Returns the valid articles held in the raw text."""
        return parse_articles(self)

    def accept(self, visitor: "ParserVisitor") -> List[Article]:
        """Lets a visitor process this parser."""
        return visitor.visit(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self.text)} chars)"


def parse_articles(parser: ArticleParser) -> List[Article]:
    """
    Decodes a parser's text and keeps the valid articles, in order.

    Decode failures are logged and produce an empty list. Invalid articles are
    dropped with a warning naming the missing fields.
    """
    try:
        articles = parser.decode()
    except DecodeError as e:
        parser.logger.error("Error reading or parsing JSON: %s", e)
        return []

    valid_articles = []
    for article in articles:
        if is_valid(article):
            valid_articles.append(article)
        else:
            parser.logger.warning(
                "Invalid Required Fields: %s", invalid_field_names(article)
            )
    return valid_articles
