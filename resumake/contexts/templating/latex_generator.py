"""
LaTeX Generator

Converts a ResumeRecord to Awesome-CV LaTeX source.

Each section builder maps one slice of the record to a LaTeX fragment and returns
an empty string when that slice is absent. Rendering has no side effects: the same
record and header configuration always produce the same text.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from jinja2 import TemplateError

from resumake.contexts.templating.config_resolver import resolve_header_config
from resumake.contexts.templating.exceptions import TemplateRenderError
from resumake.contexts.templating.latex_patterns import (
    ContactFieldPatterns,
    DateRangePatterns,
    DocumentPatterns,
    EntryMacros,
    EnvironmentNames,
    HeaderNamePatterns,
    SkillPatterns,
)
from resumake.contexts.templating.logger import (
    _log_error,
    log_document_rendered,
    log_section_rendered,
    log_section_skipped,
)
from resumake.contexts.templating.registries import TemplateRegistry
from resumake.contexts.templating.resume_data_structure import (
    Award,
    Basics,
    Education,
    Project,
    ResumeRecord,
    Skill,
    Work,
    is_present,
)
from resumake.utils.latex_tools import format_latex_environment, latex_command
from resumake.utils.text_processing import join_present, strip_indent


def _text(value: Any) -> str:
    """Value as output text; absent values become the empty string."""
    return str(value) if is_present(value) else ""


def split_name(name: str) -> Tuple[str, str]:
    """
    Split a full name into first and last name on single spaces.

    Example:
        >>> split_name("Jane van Doe")
        ('Jane', 'van Doe')
        >>> split_name("Madonna")
        ('Madonna', '')
    """
    names = str(name).split(" ")
    return names[0], " ".join(names[1:])


def format_degree(study_type: Any, area: Any) -> str:
    """
    Format the degree line: "{study_type} in {area}", or whichever one is present.

    Example:
        >>> format_degree("B.Sc.", "Physics")
        'B.Sc. in Physics'
        >>> format_degree(None, "Physics")
        'Physics'
    """
    if is_present(study_type) and is_present(area):
        return f"{study_type} in {area}"
    if is_present(study_type):
        return str(study_type)
    return _text(area)


def format_date_range(start_date: Any, end_date: Any) -> str:
    """
    Format a date range with an open end shown as 'Present'.

    Dates are opaque strings. Without a start date the end date is used alone.

    Example:
        >>> format_date_range("2020", "2024")
        '2020 – 2024'
        >>> format_date_range("2020", None)
        '2020 – Present'
        >>> format_date_range(None, "2024")
        '2024'
    """
    if is_present(start_date) and is_present(end_date):
        return f"{start_date}{DateRangePatterns.SEPARATOR}{end_date}"
    if is_present(start_date):
        return f"{start_date}{DateRangePatterns.SEPARATOR}{DateRangePatterns.PRESENT}"
    return _text(end_date)


class ResumeToLaTeXConverter:
    """Converts a ResumeRecord to an Awesome-CV LaTeX document."""

    def __init__(
        self,
        template_registry: TemplateRegistry = None,
        header_config: Dict[str, Any] = None,
    ):
        """
        Args:
            template_registry: Registry to load templates from
            header_config: Resolved header configuration (see resolve_header_config);
                           defaults to the stock Awesome-CV configuration
        """
        self.template_registry = template_registry or TemplateRegistry()
        self.header_config = header_config if header_config is not None else resolve_header_config()

    def _render(self, template, type_name: str, **context: Any) -> str:
        try:
            return strip_indent(template.render(**context))
        except TemplateError as e:
            _log_error(f"Failed to render '{type_name}' template: {e}")
            raise TemplateRenderError(
                f"Failed to render '{type_name}' template",
                type_name=type_name,
                template_path=Path(template.filename) if template.filename else None,
                original_error=e,
            ) from e

    def _render_section(self, type_name: str, **context: Any) -> str:
        template = self.template_registry.get_template(type_name)
        return self._render(template, type_name, **context)

    def generate_header(self) -> str:
        """Generate the Awesome-CV preamble from the header configuration."""
        template = self.template_registry.get_structure_template("header")
        return self._render(template, "header", config=self.header_config)

    def generate_profile_section(self, basics: Optional[Basics]) -> str:
        """
        Generate the centered name and contact block.

        The name line is blank when there is no name. Contact values (email,
        phone, address, website) are each omitted when absent and the remaining
        ones are joined with ' | '.
        """
        if basics is None:
            log_section_skipped("profile")
            return ""

        name_line = ""
        if is_present(basics.name):
            first, last = split_name(basics.name)
            name_line = (
                f"{latex_command(HeaderNamePatterns.FIRST_NAME_STYLE, first)} "
                f"{latex_command(HeaderNamePatterns.LAST_NAME_STYLE, last)} "
                f"{HeaderNamePatterns.LINE_BREAK}"
            )

        values = {
            "email": basics.email,
            "phone": basics.phone,
            "address": basics.location.address if basics.location is not None else None,
            "website": basics.website,
        }
        contact_line = join_present(
            (
                f"{{{ContactFieldPatterns.ICONS[field]}\\ {values[field]}}}"
                if is_present(values[field])
                else ""
                for field in ContactFieldPatterns.FIELDS
            ),
            ContactFieldPatterns.SEPARATOR,
        )

        # Absent name or contact values leave their line blank
        body = format_latex_environment(
            EnvironmentNames.CENTER, "\n".join([name_line, r"\vspace{2mm}", contact_line])
        )

        log_section_rendered("profile", 1)
        return self._render_section("profile", body=body)

    def convert_education_entry(self, school: Education) -> str:
        """Convert one education entry to a \\cventry call."""
        gpa_line = f"GPA: {school.gpa}" if is_present(school.gpa) else ""
        return EntryMacros.CVENTRY.render(
            format_degree(school.study_type, school.area),
            _text(school.institution),
            _text(school.location),
            format_date_range(school.start_date, school.end_date),
            gpa_line,
        )

    def generate_education_section(self, education: Optional[Sequence[Education]]) -> str:
        """Generate the Education section, one \\cventry per school in input order."""
        if education is None:
            log_section_skipped("education")
            return ""

        entries = "\n".join(self.convert_education_entry(school) for school in education)
        body = format_latex_environment(EnvironmentNames.CVENTRIES, entries)

        log_section_rendered("education", len(education))
        return self._render_section("education", body=body)

    def convert_highlights(self, highlights: Optional[Sequence[Any]]) -> str:
        """
        Convert highlights to a cvitems list.

        None gives an empty string; an empty sequence gives an empty cvitems block.
        """
        if highlights is None:
            return ""
        items = "\n".join(f"\\item {{{_text(duty)}}}" for duty in highlights)
        return format_latex_environment(EnvironmentNames.CVITEMS, items, content_indent="  ")

    def convert_work_entry(self, job: Work) -> str:
        """Convert one work entry to a \\cventry call."""
        return EntryMacros.CVENTRY.render(
            _text(job.position),
            _text(job.company),
            _text(job.location),
            format_date_range(job.start_date, job.end_date),
            self.convert_highlights(job.highlights),
        )

    def generate_experience_section(self, work: Optional[Sequence[Work]]) -> str:
        """Generate the Experience section, one \\cventry per job in input order."""
        if work is None:
            log_section_skipped("experience")
            return ""

        entries = "\n".join(self.convert_work_entry(job) for job in work)
        body = format_latex_environment(EnvironmentNames.CVENTRIES, entries)

        log_section_rendered("experience", len(work))
        return self._render_section("experience", body=body)

    def convert_skill_row(self, skill: Skill) -> str:
        """Convert one skill to a 'name: & details' table row."""
        name_part = f"{skill.name}: " if is_present(skill.name) else ""
        details = latex_command(SkillPatterns.SKILL_STYLE, f" {_text(skill.details)}")
        return f"{name_part} & {{{details}}} {SkillPatterns.ROW_END}"

    def generate_skills_section(self, skills: Optional[Sequence[Skill]]) -> str:
        """
        Generate the Skills section.

        All skills go into a two-column table inside the second argument of a
        single \\cventry; the other four arguments stay empty.
        """
        if skills is None:
            log_section_skipped("skills")
            return ""

        rows = "\n".join(self.convert_skill_row(skill) for skill in skills)
        table = format_latex_environment(
            EnvironmentNames.TABULAR, rows, mandatory_args=[SkillPatterns.COLUMN_SPEC]
        )
        table_arg = f"\\def\\arraystretch{{{SkillPatterns.ARRAYSTRETCH}}}{{{table}}}"
        entry = EntryMacros.CVENTRY.render("", table_arg, "", "", "")
        body = format_latex_environment(EnvironmentNames.CVENTRIES, entry)

        log_section_rendered("skills", len(skills))
        return self._render_section("skills", body=body)

    def convert_project_entry(self, project: Project) -> str:
        """Convert one project to a \\cventry call followed by negative spacing."""
        entry = EntryMacros.CVENTRY.render(
            _text(project.description),
            _text(project.name),
            _text(project.technologies),
            _text(project.link),
            "",
        )
        return f"{entry}\n\n\\vspace{{-5mm}}"

    def generate_projects_section(self, projects: Optional[Sequence[Project]]) -> str:
        """Generate the Projects section, one \\cventry per project in input order."""
        if projects is None:
            log_section_skipped("projects")
            return ""

        entries = "\n\n".join(self.convert_project_entry(project) for project in projects)
        body = format_latex_environment(EnvironmentNames.CVENTRIES, entries)

        log_section_rendered("projects", len(projects))
        return self._render_section("projects", body=body)

    def convert_award_entry(self, award: Award) -> str:
        """Convert one award to a \\cvhonor call: name, details, location, date."""
        return EntryMacros.CVHONOR.render(
            _text(award.name),
            _text(award.details),
            _text(award.location),
            _text(award.date),
        )

    def generate_awards_section(self, awards: Optional[Sequence[Award]]) -> str:
        """Generate the Honors & Awards section, one \\cvhonor per award."""
        if awards is None:
            log_section_skipped("awards")
            return ""

        entries = "\n".join(self.convert_award_entry(award) for award in awards)
        body = format_latex_environment(EnvironmentNames.CVHONORS, entries)

        log_section_rendered("awards", len(awards))
        return self._render_section("awards", body=body)

    def generate_document(self, record: Union[ResumeRecord, Mapping]) -> str:
        """
        Generate the complete LaTeX document.

        Args:
            record: ResumeRecord, or a JSON-style dict converted with ResumeRecord.from_dict

        Returns:
            Complete LaTeX document string
        """
        if not isinstance(record, ResumeRecord):
            record = ResumeRecord.from_dict(record)

        sections = [
            self.generate_profile_section(record.basics),
            self.generate_education_section(record.education),
            self.generate_experience_section(record.work),
            self.generate_skills_section(record.skills),
            self.generate_projects_section(record.projects),
            self.generate_awards_section(record.awards),
        ]
        present = [section for section in sections if section]

        template = self.template_registry.get_structure_template("document")
        document = self._render(
            template,
            "document",
            header=self.generate_header(),
            begin_document=DocumentPatterns.BEGIN_DOCUMENT,
            sections=present,
            whitespace=DocumentPatterns.WHITESPACE,
            end_document=DocumentPatterns.END_DOCUMENT,
        )

        log_document_rendered(len(present), len(document))
        return document


_default_converter: Optional[ResumeToLaTeXConverter] = None


def render(
    record: Union[ResumeRecord, Mapping],
    header_config: Dict[str, Any] = None,
) -> str:
    """
    Render a resume record to an Awesome-CV LaTeX document.

    Args:
        record: ResumeRecord or JSON-style resume dict
        header_config: Optional resolved header configuration; the stock
                       Awesome-CV header is used when omitted

    Returns:
        Complete LaTeX document string
    """
    global _default_converter

    if header_config is not None:
        return ResumeToLaTeXConverter(header_config=header_config).generate_document(record)

    if _default_converter is None:
        _default_converter = ResumeToLaTeXConverter()
    return _default_converter.generate_document(record)
