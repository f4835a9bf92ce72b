"""
NewsAPI format parser.

This module provides the NewsParser class for the envelope returned by
https://newsapi.org (`status`, `totalResults`, `articles`).
"""

from typing import List

from article_parser.models import Article, NewsEnvelope
from article_parser.parsers.base import ArticleParser, FormatKind, load_json


def decode_envelope(text: str) -> NewsEnvelope:
    """Decodes NewsAPI text into its envelope."""
    return NewsEnvelope.from_dict(load_json(text))


class NewsParser(ArticleParser):
    """Parses a NewsAPI envelope holding many articles."""

    format_kind = FormatKind.NEWSAPI

    def decode(self) -> List[Article]:
        envelope = decode_envelope(self.text)
        self.logger.debug(
            "Decoded envelope: status=%s totalResults=%d articles=%d",
            envelope.status,
            envelope.total_results,
            len(envelope.articles),
        )
        return list(envelope.articles)
