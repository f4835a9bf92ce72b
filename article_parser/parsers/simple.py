"""
Simple format parser.

The Simple format is one bare article object with no envelope around it.
"""

from typing import List

from article_parser.models import Article
from article_parser.parsers.base import ArticleParser, FormatKind, load_json


def decode_article(text: str) -> Article:
    """Decodes Simple-format text into a single article."""
    return Article.from_dict(load_json(text))


class SimpleParser(ArticleParser):
    """Parses a single article."""

    format_kind = FormatKind.SIMPLE

    def decode(self) -> List[Article]:
        return [decode_article(self.text)]
