"""Unit tests for templating context logging."""

import importlib

import pytest
from loguru import logger

import resumake
from resumake.contexts.templating.latex_generator import ResumeToLaTeXConverter
from resumake.contexts.templating.logger import setup_templating_logger
from resumake.contexts.templating.resume_data_structure import Education, ResumeRecord


@pytest.mark.unit
def test_setup_templating_logger_writes_provenance(tmp_path):
    """Test that the log file is created with a provenance header."""
    log_file = setup_templating_logger(tmp_path / "logs", phase="render", console=False)
    logger.remove()

    assert log_file == tmp_path / "logs" / "template.log"
    content = log_file.read_text(encoding="utf-8")
    assert "Phase: render" in content
    assert "Python:" in content


@pytest.mark.unit
def test_rendering_logs_sections_with_prefix(tmp_path):
    """Test that section rendering is logged at debug level with the context prefix."""
    log_file = setup_templating_logger(tmp_path, console=False)

    record = ResumeRecord(education=(Education(institution="MIT"), Education(institution="UCLA")))
    ResumeToLaTeXConverter().generate_document(record)
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "[template] Rendered education section (2 entries)" in content
    assert "[template] Skipped awards section (no data)" in content
    assert "MIT" not in content


@pytest.mark.unit
def test_rendering_is_silent_until_logger_setup(tmp_path):
    """Test that importing the package disables its logging until setup enables it."""
    importlib.reload(resumake)
    messages = []
    logger.add(messages.append, level="DEBUG")
    try:
        ResumeToLaTeXConverter().generate_document(ResumeRecord(awards=()))
        assert messages == []

        log_file = setup_templating_logger(tmp_path, console=False)
        ResumeToLaTeXConverter().generate_document(ResumeRecord(awards=()))
    finally:
        logger.remove()

    assert "[template] Rendered awards section (0 entries)" in log_file.read_text(encoding="utf-8")
