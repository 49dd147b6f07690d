"""
Header Configuration Resolution

Builds the configuration for the Awesome-CV preamble from defaults, named
presets and explicit overrides. Presets are composable and applied in order.

Examples:
    >>> resolve_header_config(presets=["colors_skyblue", "layout_a4"])
    >>> resolve_header_config(overrides={"fontdir": "/usr/share/fonts/awesome/"})
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from resumake.contexts.templating.defaults import AWESOME_COLORS, get_default_header_config
from resumake.contexts.templating.exceptions import HeaderConfigError

load_dotenv()
HEADER_PRESETS_PATH = Path(
    os.getenv("RESUMAKE_PRESETS_PATH", str(Path(__file__).parent / "header_presets.yaml"))
)

HEX_COLOR = re.compile(r"^[0-9A-Fa-f]{6}$")


def load_header_presets(config_path: Path = None) -> Dict[str, Any]:
    """
    Load header_presets.yaml and flatten to a single-level dict.

    Collapses nested structure: colors.skyblue -> colors_skyblue

    Args:
        config_path: Optional path to presets file (defaults to RESUMAKE_PRESETS_PATH)

    Returns:
        Flattened dict mapping preset names to configs
    """
    if config_path is None:
        config_path = HEADER_PRESETS_PATH

    nested = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    flattened = {}
    for category, presets in nested.items():
        for name, config in presets.items():
            flattened[f"{category}_{name}"] = config

    return flattened


def _validate(config: Dict[str, Any]) -> None:
    if config["color"] not in AWESOME_COLORS:
        raise HeaderConfigError(
            f"Unknown color '{config['color']}'. Available colors: {list(AWESOME_COLORS)}"
        )

    custom = config["custom_color"]
    if custom is not None and not HEX_COLOR.match(str(custom)):
        raise HeaderConfigError(
            f"custom_color must be a 6-digit HTML hex value (e.g. CA63A8), got '{custom}'"
        )


def resolve_header_config(
    overrides: Mapping[str, Any] = None,
    presets: List[str] = None,
    presets_path: Path = None,
) -> Dict[str, Any]:
    """
    Resolve the header configuration: defaults <- presets <- overrides.

    Args:
        overrides: Explicit values, applied last
        presets: Preset names (e.g., ["colors_skyblue", "layout_a4"]), applied in order
        presets_path: Optional path to presets file

    Returns:
        Plain dict with every header configuration key

    Raises:
        HeaderConfigError: If a key is unknown, a preset is missing, or a value is invalid
    """
    config = OmegaConf.create(get_default_header_config())
    # Reject keys that the header template does not know about
    OmegaConf.set_struct(config, True)

    layers = []
    if presets:
        available = load_header_presets(presets_path)
        for preset_name in presets:
            if preset_name not in available:
                raise HeaderConfigError(
                    f"Preset '{preset_name}' not found. Available presets: {list(available)}"
                )
            layers.append(available[preset_name])

    if overrides:
        layers.append(OmegaConf.to_container(OmegaConf.create(dict(overrides)), resolve=True))

    try:
        for layer in layers:
            config = OmegaConf.merge(config, layer)
    except OmegaConfBaseException as e:
        raise HeaderConfigError(f"Invalid header configuration: {e}") from e

    resolved = OmegaConf.to_container(config, resolve=True)
    _validate(resolved)
    return resolved
