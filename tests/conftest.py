"""Shared test fixtures for Halstead Insight tests."""

from pathlib import Path

import pytest

from halstead_insight.scanning.treesitter_parser import TreeSitterParser, get_supported_languages

JAVASCRIPT_AVAILABLE = "javascript" in get_supported_languages()


@pytest.fixture(scope="session")
def js_parser():
    """A parser with the JavaScript grammar loaded."""
    if not JAVASCRIPT_AVAILABLE:
        pytest.skip("tree-sitter-javascript not installed")
    return TreeSitterParser()


@pytest.fixture
def parse_js(js_parser):
    """Parse a JavaScript snippet into a syntax tree, failing on syntax errors."""

    def _parse(source: str):
        return js_parser.parse_strict(source.encode("utf-8"), "javascript", Path("snippet.js"))

    return _parse


@pytest.fixture
def make_project(tmp_path):
    """Build a project directory from a {relative_path: content} mapping."""

    def _make(files: dict) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep load_config away from the developer's home and cwd config files."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for var in (
        "HALSTEAD_MAX_FILE_SIZE_MB",
        "HALSTEAD_ALLOW_HIDDEN_FILES",
        "HALSTEAD_FOLLOW_SYMLINKS",
        "HALSTEAD_INTEROPERABILITY_SCORE",
        "HALSTEAD_DECIMAL_PLACES",
        "HALSTEAD_VERBOSITY",
    ):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def normal_values():
    """Known normal-ish values for statistics tests."""
    return [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]


@pytest.fixture
def outlier_values():
    """Values with an obvious outlier."""
    return [1.0, 1.0, 1.0, 1.0, 100.0]


@pytest.fixture
def constant_values():
    """Constant values (zero variance)."""
    return [5.0, 5.0, 5.0, 5.0, 5.0]
