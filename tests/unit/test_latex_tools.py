"""Unit tests for LaTeX formatting helpers."""

import pytest

from resumake.utils.latex_tools import LatexMacro, format_latex_environment, latex_command


@pytest.mark.unit
def test_latex_command_inline():
    """Test inline command formatting with one and two arguments."""
    assert latex_command("cvsection", "Education") == r"\cvsection{Education}"
    assert latex_command("definecolor", "awesome", "HTML") == r"\definecolor{awesome}{HTML}"


@pytest.mark.unit
def test_latex_command_none_argument_is_empty():
    """Test that None renders as an empty argument."""
    assert latex_command("headerlastnamestyle", None) == r"\headerlastnamestyle{}"


@pytest.mark.unit
def test_macro_render_one_argument_per_line():
    """Test that each argument is placed on its own indented line."""
    macro = LatexMacro("cvhonor", 4)
    result = macro.render("Award", "Details", "Place", "2020")

    assert result == "\\cvhonor\n  {Award}\n  {Details}\n  {Place}\n  {2020}"


@pytest.mark.unit
def test_macro_render_keeps_empty_arguments():
    """Test that empty and None arguments keep their brace slot."""
    macro = LatexMacro("cventry", 5)
    result = macro.render("", None, "x", "", "")

    assert result.split("\n") == ["\\cventry", "  {}", "  {}", "  {x}", "  {}", "  {}"]


@pytest.mark.unit
def test_macro_render_wrong_arity():
    """Test that a wrong number of arguments is rejected."""
    macro = LatexMacro("cventry", 5)

    with pytest.raises(ValueError, match="exactly 5 arguments"):
        macro.render("a", "b", "c", "d")

    with pytest.raises(ValueError):
        macro.render("a", "b", "c", "d", "e", "f")


@pytest.mark.unit
def test_macro_render_indents_multiline_argument():
    """Test that continuation lines of a multi-line argument are indented."""
    macro = LatexMacro("cventry", 5)
    items = "\\begin{cvitems}\n  \\item {A}\n\\end{cvitems}"
    result = macro.render("", "", "", "", items)

    assert result.endswith("  {\\begin{cvitems}\n    \\item {A}\n  \\end{cvitems}}")


@pytest.mark.unit
def test_macro_render_converts_values_to_string():
    """Test that non-string values are interpolated as text."""
    macro = LatexMacro("cvhonor", 4)
    result = macro.render("Award", 3.9, "", 2020)

    assert "  {3.9}" in result
    assert "  {2020}" in result


@pytest.mark.unit
def test_format_latex_environment():
    """Test environment generation with and without arguments."""
    assert format_latex_environment("cventries", "x") == "\\begin{cventries}\nx\n\\end{cventries}"
    assert (
        format_latex_environment("tabular", "row", mandatory_args=[" l l "])
        == "\\begin{tabular}{ l l }\nrow\n\\end{tabular}"
    )
    assert (
        format_latex_environment("itemize", "row", optional_args=["leftmargin=0pt"])
        == "\\begin{itemize}[leftmargin=0pt]\nrow\n\\end{itemize}"
    )


@pytest.mark.unit
def test_format_latex_environment_empty_content():
    """Test that empty content produces an environment without inner lines."""
    assert format_latex_environment("cvitems", "") == "\\begin{cvitems}\n\\end{cvitems}"


@pytest.mark.unit
def test_format_latex_environment_content_indent():
    """Test that content lines are indented when requested."""
    result = format_latex_environment("cvitems", "\\item {A}\n\\item {B}", content_indent="  ")

    assert result == "\\begin{cvitems}\n  \\item {A}\n  \\item {B}\n\\end{cvitems}"
