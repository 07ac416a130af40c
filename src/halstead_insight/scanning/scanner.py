"""Eligible file discovery.

Recursively walks a root directory, never descending into excluded
directories (node_modules by default), and keeps files whose suffix is one
of the configured extensions. Results are sorted so reruns see the same order.
"""

import os
from pathlib import Path
from typing import Optional

from ..config import AnalysisConfig
from ..exceptions import FileAccessError, InvalidPathError
from ..logging_config import get_logger

logger = get_logger(__name__)


class SourceScanner:
    """Finds the files a metrics run should read."""

    def __init__(self, root_dir: Path, config: Optional[AnalysisConfig] = None):
        self.root_dir = Path(root_dir)
        self.config = config or AnalysisConfig()
        self._extensions = {ext.lower() for ext in self.config.extensions}
        self._excluded = set(self.config.excluded_dirs)

    # ── Skip logic ─────────────────────────────────────────────

    def _skip_dir(self, name: str) -> bool:
        if name in self._excluded:
            return True
        return name.startswith(".") and not self.config.allow_hidden_files

    def _skip_file(self, filepath: Path) -> bool:
        if filepath.suffix.lower() not in self._extensions:
            return True
        if filepath.name.startswith(".") and not self.config.allow_hidden_files:
            return True
        if filepath.is_symlink() and not self.config.follow_symlinks:
            return True
        try:
            size = filepath.stat().st_size
        except OSError as e:
            raise FileAccessError(filepath, f"stat failed: {e}")
        limit = self.config.max_file_size_bytes
        if limit is not None and size > limit:
            logger.warning(f"Skipping {filepath}: {size} bytes exceeds the {limit} byte limit")
            return True
        return False

    # ── Discovery ──────────────────────────────────────────────

    def scan(self) -> list[Path]:
        """Return every eligible file under the root, sorted.

        Raises:
            InvalidPathError: If the root is missing or not a directory
        """
        if not self.root_dir.exists():
            raise InvalidPathError(self.root_dir, "does not exist")
        if not self.root_dir.is_dir():
            raise InvalidPathError(self.root_dir, "not a directory")

        files: list[Path] = []

        def _on_error(error: OSError) -> None:
            raise FileAccessError(Path(error.filename or self.root_dir), str(error))

        for dirpath, dirnames, filenames in os.walk(
            self.root_dir, onerror=_on_error, followlinks=self.config.follow_symlinks
        ):
            # Prune in place so os.walk never descends into skipped dirs
            dirnames[:] = sorted(d for d in dirnames if not self._skip_dir(d))
            for name in sorted(filenames):
                filepath = Path(dirpath) / name
                if not self._skip_file(filepath):
                    files.append(filepath)

        files.sort()
        logger.debug(f"Found {len(files)} eligible files under {self.root_dir}")
        return files
