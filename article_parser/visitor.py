"""
Visitors over article parsers.

A visitor lets a caller process any parser without knowing its concrete
class: `visit` branches on the parser's FormatKind and calls the matching
`visit_<format>` method.
"""

from abc import ABC, abstractmethod
from typing import List

from article_parser.models import Article
from article_parser.parsers.base import ArticleParser, FormatKind, parse_articles


class ParserVisitor(ABC):
    """Dispatches a parser to the handler for its format."""

    def visit(self, parser: ArticleParser) -> List[Article]:
        if parser.format_kind is FormatKind.NEWSAPI:
            return self.visit_newsapi(parser)
        if parser.format_kind is FormatKind.SIMPLE:
            return self.visit_simple(parser)
        raise ValueError(f"No visitor handler for format {parser.format_kind!r}")

    @abstractmethod
    def visit_newsapi(self, parser: ArticleParser) -> List[Article]:
        """Handles a NewsAPI parser."""

    @abstractmethod
    def visit_simple(self, parser: ArticleParser) -> List[Article]:
        """Handles a Simple parser."""


class ValidArticleVisitor(ParserVisitor):
    """Collects the valid articles of either format; same result as parser.parse()."""

    def visit_newsapi(self, parser: ArticleParser) -> List[Article]:
        return parse_articles(parser)

    def visit_simple(self, parser: ArticleParser) -> List[Article]:
        return parse_articles(parser)
