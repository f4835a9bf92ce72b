"""Unit tests for parser visitors."""

import json
import unittest

from article_parser.parsers import NewsParser, SimpleParser
from article_parser.visitor import ParserVisitor, ValidArticleVisitor

ARTICLE = {
    "source": {"id": None, "name": "Wire"},
    "title": "Title",
    "description": "Description",
    "url": "http://example.com/a",
    "publishedAt": "2023-10-17T12:00:00Z",
}


class RecordingVisitor(ParserVisitor):
    def __init__(self):
        self.calls = []

    def visit_newsapi(self, parser):
        self.calls.append("newsapi")
        return []

    def visit_simple(self, parser):
        self.calls.append("simple")
        return []


class TestParserVisitor(unittest.TestCase):
    def test_dispatches_on_format(self):
        visitor = RecordingVisitor()
        NewsParser("{}").accept(visitor)
        SimpleParser("{}").accept(visitor)
        self.assertEqual(visitor.calls, ["newsapi", "simple"])

    def test_incomplete_visitor_cannot_be_created(self):
        class NewsOnlyVisitor(ParserVisitor):
            def visit_newsapi(self, parser):
                return []

        with self.assertRaises(TypeError):
            ParserVisitor()  # type: ignore[abstract]
        with self.assertRaises(TypeError):
            NewsOnlyVisitor()  # type: ignore[abstract]

    def test_unknown_format(self):
        parser = NewsParser("{}")
        parser.format_kind = "rss"  # type: ignore[assignment]
        with self.assertRaises(ValueError):
            parser.accept(RecordingVisitor())


class TestValidArticleVisitor(unittest.TestCase):
    """accept(ValidArticleVisitor()) must match parse() exactly."""

    def test_newsapi_matches_parse(self):
        invalid = dict(ARTICLE, title=None)
        text = json.dumps({"status": "ok", "totalResults": 3, "articles": [ARTICLE, invalid, ARTICLE]})
        parser = NewsParser(text)
        with self.assertLogs("article_parser", level="WARNING"):
            expected = parser.parse()
        with self.assertLogs("article_parser", level="WARNING"):
            visited = parser.accept(ValidArticleVisitor())
        self.assertEqual(len(expected), 2)
        self.assertEqual(visited, expected)

    def test_simple_matches_parse(self):
        parser = SimpleParser(json.dumps(ARTICLE))
        self.assertEqual(parser.accept(ValidArticleVisitor()), parser.parse())
        self.assertEqual(len(parser.parse()), 1)

    def test_malformed_matches_parse(self):
        for parser in (NewsParser("{oops"), SimpleParser("{oops")):
            with self.subTest(format=parser.format_kind):
                with self.assertLogs("article_parser", level="ERROR"):
                    self.assertEqual(parser.accept(ValidArticleVisitor()), [])


if __name__ == "__main__":
    unittest.main()
