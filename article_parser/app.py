"""
Article Parser
This script loads news feeds from two local files and the NewsAPI top
headlines endpoint, keeps the articles that carry every required field, and
prints them to standard output.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlencode

from article_parser.exceptions import ArticleParserError
from article_parser.models import Article
from article_parser.parsers import FormatKind
from article_parser.services.loader import (
    DEFAULT_TIMEOUT,
    SourceFormat,
    SourceKind,
    load_parser,
)
from article_parser.visitor import ParserVisitor, ValidArticleVisitor

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

DEFAULT_CONFIG: Dict[str, Any] = {
    "newsapi_file": "inputs/newsapi.txt",
    "simple_file": "inputs/simple.txt",
    "newsapi_url": "https://newsapi.org/v2/top-headlines",
    "newsapi_country": "us",
    "log_file": "articles-parser.log",
    "request_timeout": DEFAULT_TIMEOUT,
}


def load_config(config_filename: str = "config.json") -> Dict[str, Any]:
    """Loads configuration from a JSON file, filling gaps with defaults."""
    # Build absolute path relative to this script
    base_dir = os.path.dirname(os.path.abspath(__file__))
    config_path = os.path.join(base_dir, config_filename)

    config = dict(DEFAULT_CONFIG)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config.update(json.load(f))
    except FileNotFoundError:
        logger.warning("Config file not found at %s. Using defaults.", config_path)
    return config


def configure_logging(log_file: Optional[str], level: str = "INFO") -> None:
    """
    Sends log records to `log_file` (appending), or to stderr when it is None.

    `level` is a standard level name (DEBUG, INFO, WARNING, ERROR, CRITICAL);
    anything else falls back to INFO with a warning.
    """
    resolved = logging.getLevelName(level.strip().upper())
    logging.basicConfig(
        level=resolved if isinstance(resolved, int) else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        filename=log_file,
        filemode="a",
    )
    if not isinstance(resolved, int):
        logger.warning("Unknown LOG_LEVEL %r. Using INFO.", level)


def build_newsapi_url(base_url: str, country: str, api_key: Optional[str]) -> str:
    """Builds the top-headlines URL, adding the apiKey parameter when known."""
    params = {"country": country}
    if api_key:
        params["apiKey"] = api_key
    return f"{base_url}?{urlencode(params)}"


def get_inputs(
    config: Dict[str, Any], api_key: Optional[str]
) -> List[Tuple[SourceFormat, str]]:
    """Returns the inputs to process, in order."""
    url = build_newsapi_url(config["newsapi_url"], config["newsapi_country"], api_key)
    return [
        (SourceFormat(SourceKind.FILE, FormatKind.NEWSAPI), config["newsapi_file"]),
        (SourceFormat(SourceKind.FILE, FormatKind.SIMPLE), config["simple_file"]),
        (SourceFormat(SourceKind.URL, FormatKind.NEWSAPI), url),
    ]


def parse_and_print(
    source_format: SourceFormat,
    location: str,
    visitor: ParserVisitor,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[Article]:
    """Loads one input, prints its valid articles and returns them."""
    try:
        parser = load_parser(source_format, location, timeout=timeout)
    except ArticleParserError as e:
        logger.error("Error loading data from source: %s", e)
        return []

    articles = parser.accept(visitor)
    logger.info(
        "%s %s: %d valid articles.",
        source_format.source.value,
        source_format.format.value,
        len(articles),
    )
    for article in articles:
        print(article)
    return articles


def main():
    """Main execution entry point."""
    config = load_config()
    configure_logging(config.get("log_file"), os.environ.get("LOG_LEVEL", "INFO"))

    api_key = os.environ.get("NEWSAPI_KEY")
    if not api_key:
        logger.warning("NEWSAPI_KEY not set. NewsAPI will reject the URL request.")

    visitor = ValidArticleVisitor()
    timeout = config.get("request_timeout", DEFAULT_TIMEOUT)
    for source_format, location in get_inputs(config, api_key):
        parse_and_print(source_format, location, visitor, timeout=timeout)


if __name__ == "__main__":
    main()
