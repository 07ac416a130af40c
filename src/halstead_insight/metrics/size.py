"""Line classification: blank, comment or code."""

from .models import LineCounts

# "*" catches the continuation lines of /** ... */ blocks
COMMENT_MARKERS = ("//", "/*", "*")


def count_lines(text: str) -> LineCounts:
    """Classify every line of ``text``.

    Lines are split on "\\n", so empty text is a single blank line and a
    trailing newline adds a final blank line. Multi-line comments are not
    tracked: a comment body line that doesn't start with a marker counts
    as code.
    """
    blank = comment = 0
    lines = text.split("\n")
    for line in lines:
        stripped = line.strip()
        if not stripped:
            blank += 1
        elif stripped.startswith(COMMENT_MARKERS):
            comment += 1

    return LineCounts(blank=blank, comment=comment, code=len(lines) - blank - comment)
