"""
Templating Context

Responsibilities:
- Represents the sanitized resume input (ResumeRecord)
- Builds Awesome-CV LaTeX fragments for each resume section
- Assembles the complete document with a configurable preamble

Owns: Resume record model, section builders, LaTeX templates, header configuration
Never: Writes files, compiles PDFs or validates resume content
"""

from resumake.contexts.templating.config_resolver import (
    load_header_presets,
    resolve_header_config,
)
from resumake.contexts.templating.exceptions import (
    HeaderConfigError,
    InvalidResumeStructureError,
    TemplateRenderError,
)
from resumake.contexts.templating.latex_generator import ResumeToLaTeXConverter, render
from resumake.contexts.templating.resume_data_structure import (
    Award,
    Basics,
    Education,
    Location,
    Project,
    ResumeRecord,
    Skill,
    Work,
)

__all__ = [
    # Rendering
    "render",
    "ResumeToLaTeXConverter",
    # Header configuration
    "resolve_header_config",
    "load_header_presets",
    # Data structure classes
    "ResumeRecord",
    "Basics",
    "Location",
    "Education",
    "Work",
    "Skill",
    "Project",
    "Award",
    # Errors
    "HeaderConfigError",
    "InvalidResumeStructureError",
    "TemplateRenderError",
]
