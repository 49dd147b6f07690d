"""
RESUMAKE - Resume data to Awesome-CV LaTeX rendering

Turns a sanitized resume record (profile, education, work, skills, projects,
awards) into LaTeX source for the Awesome-CV document class.

Architecture:
- Templating Context: resume data model, section builders and document rendering
- Utils: LaTeX macro serialization, text helpers and logging setup
"""

__version__ = "0.1.0"

from loguru import logger

# Library logging stays silent until a context logger is set up
logger.disable("resumake")
