"""
LaTeX formatting helpers for generation.

Macro calls with a fixed number of brace arguments go through LatexMacro so the
argument count of an emitted call never depends on which values are present.
"""

from dataclasses import dataclass
from typing import Any, List

from resumake.utils.text_processing import indent_lines


def latex_command(name: str, *args: Any) -> str:
    """
    Format an inline LaTeX command with brace arguments.

    Example:
        >>> latex_command("cvsection", "Education")
        '\\\\cvsection{Education}'
    """
    args_str = "".join(f"{{{'' if arg is None else arg}}}" for arg in args)
    return f"\\{name}{args_str}"


@dataclass(frozen=True)
class LatexMacro:
    """
    A LaTeX macro with a fixed arity, rendered one argument per line.

    Attributes:
        name: Macro name without the leading backslash (e.g. 'cventry')
        arity: Exact number of brace-delimited arguments the macro takes
    """

    name: str
    arity: int

    def render(self, *args: Any, indent: str = "  ") -> str:
        """
        Render a call of this macro with exactly `arity` arguments.

        None becomes an empty argument; other values are interpolated with str().
        Continuation lines of multi-line arguments are indented under their brace.

        Raises:
            ValueError: If the number of arguments differs from the arity

        Example:
            >>> LatexMacro("cvhonor", 4).render("Award", "", None, "2020")
            '\\\\cvhonor\\n  {Award}\\n  {}\\n  {}\\n  {2020}'
        """
        if len(args) != self.arity:
            raise ValueError(
                f"\\{self.name} takes exactly {self.arity} arguments, got {len(args)}"
            )

        lines = [f"\\{self.name}"]
        for arg in args:
            value = "" if arg is None else str(arg)
            lines.append(f"{indent}{{{indent_lines(value, indent)}}}")
        return "\n".join(lines)


def format_latex_environment(
    env_name: str,
    content: str,
    optional_args: List[str] = None,
    mandatory_args: List[str] = None,
    content_indent: str = "",
) -> str:
    """
    Generate LaTeX environment with arguments.

    Builds: \\begin{env}[opt1][opt2]{arg1}{arg2}
            content
            \\end{env}

    Args:
        env_name: Environment name (e.g., "cvitems", "tabular")
        content: Inner content (may be empty)
        optional_args: Optional arguments in [...] (default: None)
        mandatory_args: Mandatory arguments in {...} (default: None)
        content_indent: Prefix added to every non-blank content line

    Returns:
        Complete LaTeX environment string

    Example:
        >>> format_latex_environment("tabular", "a & b \\\\\\\\", mandatory_args=[" l l "])
        '\\\\begin{tabular}{ l l }\\na & b \\\\\\\\\\n\\\\end{tabular}'
    """
    opening = f"\\begin{{{env_name}}}"

    if optional_args:
        for arg in optional_args:
            opening += f"[{arg}]"

    if mandatory_args:
        for arg in mandatory_args:
            opening += f"{{{arg}}}"

    closing = f"\\end{{{env_name}}}"

    if content_indent:
        content = "\n".join(
            f"{content_indent}{line}" if line.strip() else line for line in content.split("\n")
        )

    if not content:
        return f"{opening}\n{closing}"
    return f"{opening}\n{content}\n{closing}"
