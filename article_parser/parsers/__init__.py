"""Article parsers, one per feed format."""

import logging
from typing import Dict, Optional, Type

from article_parser.parsers.base import ArticleParser, FormatKind, parse_articles
from article_parser.parsers.newsapi import NewsParser
from article_parser.parsers.simple import SimpleParser

PARSERS: Dict[FormatKind, Type[ArticleParser]] = {
    FormatKind.NEWSAPI: NewsParser,
    FormatKind.SIMPLE: SimpleParser,
}


def create_parser(
    format_kind: FormatKind, text: str, log: Optional[logging.Logger] = None
) -> ArticleParser:
    """Returns the parser for `format_kind` wrapping `text`."""
    return PARSERS[format_kind](text, log)


__all__ = [
    "ArticleParser",
    "FormatKind",
    "NewsParser",
    "SimpleParser",
    "PARSERS",
    "create_parser",
    "parse_articles",
]
