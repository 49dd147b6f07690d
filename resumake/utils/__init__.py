"""
Shared utilities for RESUMAKE.

Common functionality used across contexts:
- LaTeX macro and environment formatting
- Text processing
- Logging setup
"""

from resumake.utils.latex_tools import LatexMacro, format_latex_environment
from resumake.utils.text_processing import join_present, strip_indent

__all__ = [
    "LatexMacro",
    "format_latex_environment",
    "join_present",
    "strip_indent",
]
