"""
Resume Record Structure

Immutable representation of the sanitized resume data consumed by the LaTeX
generator. Field names are snake_case; from_dict() also accepts the camelCase
keys used by JSON resume documents (studyType, startDate, endDate).

Every field is optional. A missing section is None, which suppresses the whole
section; a missing leaf is None, which omits only that value from the output.
Only a section or highlights value that is not a list is rejected.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Tuple, Type, TypeVar

from omegaconf import OmegaConf

from resumake.contexts.templating.exceptions import InvalidResumeStructureError

T = TypeVar("T")


def is_present(value: Any) -> bool:
    """True unless value is None or the empty string."""
    return value is not None and value != ""


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _as_plain(data: Any) -> Any:
    """Unwrap OmegaConf containers into plain dicts and lists."""
    if OmegaConf.is_config(data):
        return OmegaConf.to_container(data, resolve=True)
    return data


def _as_mapping(data: Any) -> Mapping:
    """Mapping view of data; anything that is not a mapping has no fields."""
    data = _as_plain(data)
    return data if isinstance(data, Mapping) else {}


def _require_sequence(data: Any, where: str) -> Tuple[Any, ...]:
    data = _as_plain(data)
    if isinstance(data, (str, bytes)) or not isinstance(data, (list, tuple)):
        raise InvalidResumeStructureError(
            f"{where} must be a list, got {type(data).__name__}"
        )
    return tuple(data)


def _lookup(data: Mapping, name: str) -> Any:
    """Get a field by its camelCase key, falling back to the snake_case key."""
    camel = _camel_case(name)
    if camel in data:
        return data[camel]
    return data.get(name)


def _leaf_fields(cls: Type[T], data: Any, **nested: Any) -> T:
    """Build a dataclass from the leaf values in data, with pre-built nested fields."""
    data = _as_mapping(data)
    values = {}
    for field in fields(cls):
        if field.name in nested:
            values[field.name] = nested[field.name]
        else:
            values[field.name] = _lookup(data, field.name)
    return cls(**values)


@dataclass(frozen=True)
class Location:
    address: Optional[str] = None


@dataclass(frozen=True)
class Basics:
    """Name and contact details shown in the profile block."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[Location] = None
    website: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Basics":
        data = _as_mapping(data)
        location = data.get("location")
        if location is not None:
            location = _leaf_fields(Location, location)
        return _leaf_fields(cls, data, location=location)


@dataclass(frozen=True)
class Education:
    institution: Optional[str] = None
    location: Optional[str] = None
    area: Optional[str] = None
    study_type: Optional[str] = None
    gpa: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


@dataclass(frozen=True)
class Work:
    """
    One position held.

    Attributes:
        highlights: Bullet points in order. None omits the item list entirely;
            an empty tuple still renders an (empty) item list.
    """

    company: Optional[str] = None
    position: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    highlights: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_dict(cls, data: Any, where: str = "work entry") -> "Work":
        data = _as_mapping(data)
        highlights = data.get("highlights")
        if highlights is not None:
            highlights = _require_sequence(highlights, f"{where}.highlights")
        return _leaf_fields(cls, data, highlights=highlights)


@dataclass(frozen=True)
class Skill:
    name: Optional[str] = None
    details: Optional[str] = None


@dataclass(frozen=True)
class Project:
    name: Optional[str] = None
    description: Optional[str] = None
    technologies: Optional[str] = None
    link: Optional[str] = None


@dataclass(frozen=True)
class Award:
    name: Optional[str] = None
    details: Optional[str] = None
    date: Optional[str] = None
    location: Optional[str] = None


def _entries(data: Mapping, key: str, build) -> Optional[Tuple[Any, ...]]:
    value = data.get(key)
    if value is None:
        return None
    return tuple(
        build(entry, f"{key}[{index}]")
        for index, entry in enumerate(_require_sequence(value, key))
    )


def _plain_entry(cls: Type[T]):
    return lambda entry, where: _leaf_fields(cls, entry)


@dataclass(frozen=True)
class ResumeRecord:
    """
    Complete resume input for the LaTeX generator.

    Sections are tuples in display order; None means the section is absent.
    """

    basics: Optional[Basics] = None
    education: Optional[Tuple[Education, ...]] = None
    work: Optional[Tuple[Work, ...]] = None
    skills: Optional[Tuple[Skill, ...]] = None
    projects: Optional[Tuple[Project, ...]] = None
    awards: Optional[Tuple[Award, ...]] = None

    @classmethod
    def from_dict(cls, data: Any) -> "ResumeRecord":
        """
        Build a record from a JSON-style dict or an OmegaConf config.

        Unknown keys are ignored and leaf values are kept as given. A value that
        should be a mapping but is not (an entry, basics, basics.location) has
        no fields, so it renders like an empty mapping.

        Raises:
            InvalidResumeStructureError: If a section or highlights is not a list
        """
        data = _as_mapping(data)

        basics = data.get("basics")
        if is_present(basics):
            basics = Basics.from_dict(basics)
        else:
            basics = None

        return cls(
            basics=basics,
            education=_entries(data, "education", _plain_entry(Education)),
            work=_entries(data, "work", Work.from_dict),
            skills=_entries(data, "skills", _plain_entry(Skill)),
            projects=_entries(data, "projects", _plain_entry(Project)),
            awards=_entries(data, "awards", _plain_entry(Award)),
        )
