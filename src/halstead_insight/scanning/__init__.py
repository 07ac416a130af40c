"""File discovery and tree-sitter parsing."""

from .scanner import SourceScanner
from .treesitter_parser import TREE_SITTER_AVAILABLE, TreeSitterParser, get_supported_languages

__all__ = [
    "SourceScanner",
    "TREE_SITTER_AVAILABLE",
    "TreeSitterParser",
    "get_supported_languages",
]
