"""
Default values for the Awesome-CV document header.

With these defaults the generated preamble matches the stock Awesome-CV
configuration block: no class options, fonts in 'fonts/', sections in 'resume/'
and the red highlight color.
"""

from typing import Any, Dict

# Highlight colors predefined by awesome-cv.cls
AWESOME_COLORS = (
    "awesome-emerald",
    "awesome-skyblue",
    "awesome-red",
    "awesome-pink",
    "awesome-orange",
    "awesome-nephritis",
    "awesome-concrete",
    "awesome-darknight",
)

DEFAULT_HEADER_CONFIG = {
    # Options for \documentclass[...]{awesome-cv}
    "document_options": "",
    "fontdir": "fonts/",
    "sectiondir": "resume/",
    "color": "awesome-red",
    # HTML hex color; replaces the palette color when set
    "custom_color": None,
    # Active \headersocialsep value; commented-out hint when None
    "social_separator": None,
}


def get_default_header_config() -> Dict[str, Any]:
    """Return a fresh copy of the default header configuration."""
    return DEFAULT_HEADER_CONFIG.copy()
