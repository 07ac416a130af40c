"""Tree-sitter parser wrapper.

Provides a unified interface for tree-sitter parsing of the script languages
the metrics engine understands (JavaScript, TypeScript, TSX).
Handles a missing tree-sitter dependency gracefully: every script file is then
reported as unparsable and only contributes to size metrics.

Usage:
    if TREE_SITTER_AVAILABLE:
        parser = TreeSitterParser()
        tree = parser.parse_strict(code_bytes, "javascript", path)
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..exceptions import ParsingError
from ..logging_config import get_logger

logger = get_logger(__name__)

TREE_SITTER_AVAILABLE = False
_tree_sitter_module: Any = None
_language_modules: dict[str, Any] = {}

try:
    import tree_sitter as _tree_sitter_module  # type: ignore[no-redef]

    TREE_SITTER_AVAILABLE = True

    try:
        import tree_sitter_javascript

        _language_modules["javascript"] = tree_sitter_javascript
    except ImportError:
        pass

    try:
        import tree_sitter_typescript

        _language_modules["typescript"] = tree_sitter_typescript
        # TSX is bundled with tree-sitter-typescript, store it separately
        _language_modules["tsx"] = tree_sitter_typescript
    except ImportError:
        pass

except ImportError:
    TREE_SITTER_AVAILABLE = False


if TYPE_CHECKING:
    class Node:
        text: bytes | None
        type: str
        start_byte: int
        is_named: bool
        has_error: bool
        children: list[Node]

        def child_by_field_name(self, name: str) -> Node | None: ...

    class Tree:
        root_node: Node


def get_supported_languages() -> list[str]:
    """Get list of languages with installed grammars."""
    if not TREE_SITTER_AVAILABLE:
        return []
    return list(_language_modules.keys())


class TreeSitterParser:
    """Wrapper around tree-sitter for the supported script grammars.

    Check TREE_SITTER_AVAILABLE before using, or check if parse() returns None.
    """

    def __init__(self) -> None:
        """Initialize parser with available languages."""
        self._parsers: dict[str, Any] = {}

        if not TREE_SITTER_AVAILABLE:
            return

        for lang_name, lang_module in _language_modules.items():
            # tree-sitter-typescript exposes language_typescript()/language_tsx()
            lang_fn = getattr(lang_module, f"language_{lang_name}", None)
            if lang_fn is None:
                lang_fn = getattr(lang_module, "language", None)
            if lang_fn is None:
                continue

            try:
                # tree-sitter >= 0.23 returns PyCapsule; wrap in Language()
                lang_obj = _tree_sitter_module.Language(lang_fn())
                self._parsers[lang_name] = _tree_sitter_module.Parser(lang_obj)
            except (TypeError, ValueError) as e:
                logger.debug(f"Cannot load {lang_name} grammar: {e}")

    def parse(self, code: bytes, language: str) -> Tree | None:
        """Parse code and return syntax tree.

        Args:
            code: Source code as bytes
            language: Language name (e.g., "javascript")

        Returns:
            Tree object, or None if the language is not supported
            or tree-sitter is not available
        """
        parser = self._parsers.get(language)
        if parser is None:
            return None
        result: Tree = parser.parse(code)
        return result

    def parse_strict(self, code: bytes, language: str, filepath: Path) -> Tree:
        """Parse code, treating any syntax error as a failure.

        tree-sitter always produces a tree; a source the grammar rejects
        shows up as ERROR/MISSING nodes, flagged by ``root_node.has_error``.

        Raises:
            ParsingError: If the grammar is unavailable or the source has errors
        """
        if not self.is_language_supported(language):
            raise ParsingError(filepath, language, "grammar not installed")

        tree = self.parse(code, language)
        if tree is None:
            raise ParsingError(filepath, language, "parser returned no tree")
        if tree.root_node.has_error:
            raise ParsingError(filepath, language, "syntax error")
        return tree

    def is_language_supported(self, language: str) -> bool:
        """Check if a language is supported."""
        return language in self._parsers
