"""Public API for Halstead Insight.

Example:
    >>> from halstead_insight import analyze
    >>>
    >>> report = analyze("/path/to/project")
    >>> report.maintainability_index
    >>>
    >>> # With customization
    >>> report = analyze("/path/to/project", excluded_dirs=["node_modules", "dist"])
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .analysis import MetricsEngine
from .config import load_config
from .exceptions import InvalidPathError
from .logging_config import get_logger
from .metrics import AggregateReport

logger = get_logger(__name__)


def analyze(
    path: str = ".",
    config_file: Optional[Path] = None,
    **overrides,
) -> AggregateReport:
    """Compute the aggregate metrics of every eligible file under ``path``.

    Args:
        path: Root directory of the project
        config_file: Optional TOML config file
        **overrides: AnalysisConfig fields to override

    Returns:
        The finalized AggregateReport

    Raises:
        InvalidPathError: If path is not an existing directory
        FileAccessError: If a discovered file cannot be read
        ConfigurationError: If the configuration is invalid
    """
    root = Path(path).expanduser()
    if not root.is_dir():
        raise InvalidPathError(root, "not an existing directory")

    config = load_config(config_file=config_file, **overrides)
    logger.debug(f"Loaded config: {config}")

    return MetricsEngine(config).run(root)
