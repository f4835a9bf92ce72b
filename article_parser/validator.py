"""
Required-field validation for articles.

An article is valid when its title, description, publication date and URL are
all present. Presence means "not None": an empty string still counts.
"""

from typing import List, Tuple

from article_parser.models import Article

# (attribute, label) in reporting order
REQUIRED_FIELDS: List[Tuple[str, str]] = [
    ("title", "Title"),
    ("description", "Description"),
    ("published_at", "Published At"),
    ("url", "URL"),
]


def is_valid(article: Article) -> bool:
    """Returns True if every required field is present."""
    return all(getattr(article, attr) is not None for attr, _ in REQUIRED_FIELDS)


def invalid_field_names(article: Article) -> str:
    """Lists the labels of missing required fields, each followed by a space."""
    return "".join(
        f"{label} " for attr, label in REQUIRED_FIELDS if getattr(article, attr) is None
    )
