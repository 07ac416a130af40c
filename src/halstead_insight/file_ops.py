"""
Safe file operations for Halstead Insight.

Reads and writes are funnelled through here so that OS failures surface as
FileAccessError.
"""

from pathlib import Path

from .exceptions import FileAccessError


def safe_read_file(filepath: Path, encoding: str = "utf-8", errors: str = "replace") -> str:
    """
    Read a whole text file.

    Args:
        filepath: File to read
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        File contents as string

    Raises:
        FileAccessError: If file cannot be read
    """
    try:
        with open(filepath, encoding=encoding, errors=errors) as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def safe_write_file(filepath: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write a text file, creating parent directories as needed.

    Raises:
        FileAccessError: If file cannot be written
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps csv module line endings intact
        with open(filepath, "w", encoding=encoding, newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileAccessError(filepath, f"Write failed: {e}")
