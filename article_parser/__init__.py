"""
article_parser

Loads NewsAPI and Simple-format JSON feeds from files or URLs and returns
only the articles that carry a title, description, publication date and URL.

Example
-------
from article_parser import NewsParser

for article in NewsParser(raw_json).parse():
    print(article)
"""
from .models import Article, NewsEnvelope, Source
from .parsers import FormatKind, NewsParser, SimpleParser, create_parser
from .services.loader import SourceFormat, SourceKind, load_parser
from .validator import invalid_field_names, is_valid
from .visitor import ParserVisitor, ValidArticleVisitor

__all__ = [
    "Article",
    "NewsEnvelope",
    "Source",
    "FormatKind",
    "NewsParser",
    "SimpleParser",
    "create_parser",
    "SourceFormat",
    "SourceKind",
    "load_parser",
    "is_valid",
    "invalid_field_names",
    "ParserVisitor",
    "ValidArticleVisitor",
]
