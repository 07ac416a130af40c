"""Tests for tree-sitter parser wrapper."""

from pathlib import Path

import pytest

from halstead_insight.exceptions import ParsingError
from halstead_insight.scanning.treesitter_parser import (
    TREE_SITTER_AVAILABLE,
    TreeSitterParser,
    get_supported_languages,
)


class TestTreeSitterAvailability:
    """Test tree-sitter availability detection."""

    def test_availability_flag_is_bool(self):
        assert isinstance(TREE_SITTER_AVAILABLE, bool)

    def test_supported_languages_returns_list(self):
        assert isinstance(get_supported_languages(), list)

    def test_supported_languages_empty_when_unavailable(self):
        if not TREE_SITTER_AVAILABLE:
            assert get_supported_languages() == []


class TestTreeSitterParser:
    """Tests that require the JavaScript grammar."""

    def test_parse_javascript_returns_tree(self, js_parser):
        tree = js_parser.parse(b"function greet(name) { return name; }", "javascript")
        assert tree is not None
        assert tree.root_node.type == "program"

    def test_parse_unknown_language_returns_none(self, js_parser):
        assert js_parser.parse(b"some code", "unknown_language") is None

    def test_parse_strict_accepts_valid_source(self, js_parser):
        tree = js_parser.parse_strict(b"const x = 1;", "javascript", Path("ok.js"))
        assert not tree.root_node.has_error

    def test_parse_strict_rejects_syntax_errors(self, js_parser):
        with pytest.raises(ParsingError) as exc_info:
            js_parser.parse_strict(b"function broken( {\n", "javascript", Path("bad.js"))
        assert exc_info.value.filepath == Path("bad.js")
        assert exc_info.value.reason == "syntax error"

    def test_typescript_parse(self, js_parser):
        if "typescript" not in get_supported_languages():
            pytest.skip("TypeScript grammar not installed")
        code = b"function greet(name: string): string { return name; }"
        tree = js_parser.parse_strict(code, "typescript", Path("greet.ts"))
        assert tree.root_node is not None


class TestTreeSitterParserFallback:
    def test_unsupported_language_is_a_parse_error(self):
        parser = TreeSitterParser()
        with pytest.raises(ParsingError) as exc_info:
            parser.parse_strict(b"x", "cobol", Path("a.cbl"))
        assert exc_info.value.reason == "grammar not installed"
