"""
Templating Registries

Loads and caches the Jinja2 templates used for LaTeX generation.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("RESUMAKE_TEMPLATES_PATH", str(Path(__file__).parent / "template"))
)


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for LaTeX generation.

    Section templates live in template/types/{type_name}/template.tex.jinja,
    document-level templates in template/structure/{name}.tex.jinja. Templates
    use custom delimiters to avoid conflicts with LaTeX syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base template directory. Defaults to
                           RESUMAKE_TEMPLATES_PATH from environment, or the
                           templates shipped with the package
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            # Preserve whitespace (important for LaTeX)
            trim_blocks=False,
            lstrip_blocks=False,
            keep_trailing_newline=True,
        )

    def _load(self, relative_path: str, description: str) -> Template:
        if relative_path in self._cache:
            return self._cache[relative_path]

        try:
            template = self.env.get_template(relative_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for {description} at {self.templates_path / relative_path}"
            ) from e

        self._cache[relative_path] = template
        return template

    def get_template(self, type_name: str) -> Template:
        """
        Get a section template by type name, loading and caching it if necessary.

        Args:
            type_name: Name of the section type (e.g., 'education')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        return self._load(f"types/{type_name}/template.tex.jinja", f"type '{type_name}'")

    def get_structure_template(self, name: str) -> Template:
        """
        Get a document structure template ('header' or 'document').

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        return self._load(f"structure/{name}.tex.jinja", f"structure '{name}'")

    def get_template_path(self, type_name: str) -> Path:
        """Get the file path for a section type's template."""
        return self.templates_path / "types" / type_name / "template.tex.jinja"

    def get_structure_template_path(self, name: str) -> Path:
        """Get the file path for a document structure template."""
        return self.templates_path / "structure" / f"{name}.tex.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, type_name: str) -> bool:
        """Check if a section template is in the cache."""
        return f"types/{type_name}/template.tex.jinja" in self._cache
