"""
Text processing utilities for assembling generated LaTeX.
"""

import textwrap
from typing import Iterable


def strip_indent(text: str) -> str:
    """
    Remove the common leading indentation from every line and trim the ends.

    Blank lines are ignored when computing the common indentation, so nested
    fragments can be interpolated into a block and still come out left-aligned.

    Args:
        text: Multi-line text, possibly indented

    Returns:
        Dedented text without leading or trailing blank lines

    Example:
        >>> strip_indent("\\n    \\\\cventry\\n      {Engineer}\\n")
        '\\\\cventry\\n  {Engineer}'
    """
    return textwrap.dedent(text).strip()


def indent_lines(text: str, prefix: str) -> str:
    """
    Prefix every non-blank line after the first with `prefix`.

    Used when a multi-line value is interpolated after a prefix that is already
    on the current line (e.g. a macro argument), so continuation lines line up.

    Example:
        >>> indent_lines("\\\\begin{cvitems}\\n\\\\item {A}\\n\\\\end{cvitems}", "  ")
        '\\\\begin{cvitems}\\n  \\\\item {A}\\n  \\\\end{cvitems}'
    """
    lines = text.split("\n")
    return "\n".join(
        [lines[0]] + [f"{prefix}{line}" if line.strip() else line for line in lines[1:]]
    )


def join_present(parts: Iterable[str], separator: str) -> str:
    """
    Join the non-empty parts with a separator.

    Empty parts are dropped before joining, so no doubled separators appear.

    Example:
        >>> join_present(["a", "", "c"], " | ")
        'a | c'
    """
    return separator.join(part for part in parts if part)
