"""
Data models for the Article Parser application.

Records are immutable and compare by value. Every string field is optional at
decode time: a missing key or a JSON null becomes None, while an empty string
is kept as a present value.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from article_parser.exceptions import DecodeError


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    """Reads a string field, coercing JSON scalars to their JSON text."""
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    raise DecodeError(f"Field '{key}' must be a string, got {type(value).__name__}")


def _require_object(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"Expected {what} to be a JSON object")
    return value


@dataclass(frozen=True)
class Source:
    """The publisher an article came from."""

    id: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Source":
        data = _require_object(data, "source")
        return cls(id=_optional_str(data, "id"), name=_optional_str(data, "name"))

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Article:
    """A single news article as found in a feed."""

    source: Optional[Source] = None
    author: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    url_to_image: Optional[str] = None
    published_at: Optional[str] = None
    content: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Article":
        """Builds an Article from a decoded JSON object."""
        data = _require_object(data, "article")
        raw_source = data.get("source")
        return cls(
            source=Source.from_dict(raw_source) if raw_source is not None else None,
            author=_optional_str(data, "author"),
            title=_optional_str(data, "title"),
            description=_optional_str(data, "description"),
            url=_optional_str(data, "url"),
            url_to_image=_optional_str(data, "urlToImage"),
            published_at=_optional_str(data, "publishedAt"),
            content=_optional_str(data, "content"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Re-encodes the article using the feed's JSON keys."""
        return {
            "source": self.source.to_dict() if self.source else None,
            "author": self.author,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "urlToImage": self.url_to_image,
            "publishedAt": self.published_at,
            "content": self.content,
        }

    def __str__(self) -> str:
        return (
            f"Title: {self.title}\n"
            f"Description: {self.description}\n"
            f"Published At: {self.published_at}\n"
            f"URL: {self.url}\n"
        )


@dataclass(frozen=True)
class NewsEnvelope:
    """The NewsAPI response wrapper. Only lives for the duration of a decode."""

    status: Optional[str] = None
    total_results: int = 0
    articles: Tuple[Article, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Any) -> "NewsEnvelope":
        data = _require_object(data, "envelope")

        total = data.get("totalResults")
        if total is None:
            total = 0
        elif isinstance(total, bool) or not isinstance(total, int):
            raise DecodeError("Field 'totalResults' must be an integer")

        raw_articles = data.get("articles")
        if raw_articles is None:
            raw_articles = []
        elif not isinstance(raw_articles, list):
            raise DecodeError("Field 'articles' must be a list")

        return cls(
            status=_optional_str(data, "status"),
            total_results=total,
            articles=tuple(Article.from_dict(item) for item in raw_articles),
        )
