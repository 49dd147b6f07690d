"""Unit tests for the resume record model."""

from dataclasses import FrozenInstanceError

import pytest
from omegaconf import OmegaConf

from resumake.contexts.templating.exceptions import InvalidResumeStructureError
from resumake.contexts.templating.resume_data_structure import (
    Basics,
    Education,
    Location,
    ResumeRecord,
    Work,
    is_present,
)


@pytest.mark.unit
def test_is_present():
    """Test presence rules: None and empty string are absent, everything else present."""
    assert not is_present(None)
    assert not is_present("")
    assert is_present("x")
    assert is_present(0)
    assert is_present([])


@pytest.mark.unit
def test_from_dict_empty():
    """Test that an empty dict gives a record with every section absent."""
    record = ResumeRecord.from_dict({})

    assert record == ResumeRecord()
    assert record.basics is None
    assert record.education is None
    assert record.work is None
    assert record.skills is None
    assert record.projects is None
    assert record.awards is None


@pytest.mark.unit
def test_from_dict_camel_case_keys():
    """Test that JSON resume style camelCase keys map to snake_case fields."""
    record = ResumeRecord.from_dict(
        {
            "education": [
                {"studyType": "B.Sc.", "area": "Physics", "startDate": "2016", "endDate": "2020"}
            ]
        }
    )

    assert record.education == (
        Education(area="Physics", study_type="B.Sc.", start_date="2016", end_date="2020"),
    )


@pytest.mark.unit
def test_from_dict_snake_case_keys():
    """Test that snake_case keys are accepted too."""
    record = ResumeRecord.from_dict({"work": [{"start_date": "2020", "position": "Engineer"}]})

    assert record.work[0].start_date == "2020"
    assert record.work[0].position == "Engineer"


@pytest.mark.unit
def test_from_dict_nested_basics():
    """Test basics with nested location."""
    record = ResumeRecord.from_dict(
        {"basics": {"name": "Jane Doe", "location": {"address": "Springfield"}}}
    )

    assert record.basics == Basics(name="Jane Doe", location=Location(address="Springfield"))


@pytest.mark.unit
def test_from_dict_highlights():
    """Test that highlights become a tuple and absent highlights stay None."""
    record = ResumeRecord.from_dict(
        {"work": [{"highlights": ["Did X", "Did Y"]}, {"highlights": []}, {}]}
    )

    assert record.work[0].highlights == ("Did X", "Did Y")
    assert record.work[1].highlights == ()
    assert record.work[2].highlights is None


@pytest.mark.unit
def test_from_dict_empty_section_is_present():
    """Test that an empty list is kept as an empty section, not dropped."""
    record = ResumeRecord.from_dict({"awards": []})

    assert record.awards == ()


@pytest.mark.unit
def test_from_dict_ignores_unknown_keys():
    """Test that keys outside the model are ignored."""
    record = ResumeRecord.from_dict(
        {"meta": {"theme": "x"}, "skills": [{"name": "Python", "level": "expert"}]}
    )

    assert record.skills[0].name == "Python"
    assert record.skills[0].details is None


@pytest.mark.unit
def test_from_dict_keeps_leaf_values_as_given():
    """Test that leaf values are not coerced."""
    record = ResumeRecord.from_dict({"education": [{"gpa": 3.9}]})

    assert record.education[0].gpa == 3.9


@pytest.mark.unit
def test_from_dict_omegaconf():
    """Test building a record from an OmegaConf config."""
    config = OmegaConf.create({"basics": {"name": "Jane"}, "work": [{"highlights": ["A"]}]})
    record = ResumeRecord.from_dict(config)

    assert record.basics.name == "Jane"
    assert record.work == (Work(highlights=("A",)),)


@pytest.mark.unit
@pytest.mark.parametrize(
    "data, where",
    [
        ({"education": "MIT"}, "education"),
        ({"awards": {"name": "Dean's List"}}, "awards"),
        ({"work": [{"highlights": "Did X"}]}, r"work\[0\]\.highlights"),
    ],
)
def test_from_dict_section_not_a_list(data, where):
    """Test that a section or highlights that is not a list raises with its location."""
    with pytest.raises(InvalidResumeStructureError, match=where):
        ResumeRecord.from_dict(data)


@pytest.mark.unit
def test_from_dict_non_mapping_values_have_no_fields():
    """Test that non-mapping entries, basics and locations are read as empty."""
    record = ResumeRecord.from_dict(
        {
            "basics": {"name": "Jane Doe", "location": "Springfield"},
            "education": ["MIT"],
            "work": [["Engineer"]],
            "awards": [None],
        }
    )

    assert record.basics == Basics(name="Jane Doe", location=Location())
    assert record.education == (Education(),)
    assert record.work == (Work(),)
    assert record.awards[0].name is None


@pytest.mark.unit
def test_from_dict_non_mapping_basics_and_record():
    """Test that a basics value that is not a mapping still gives an empty profile."""
    assert ResumeRecord.from_dict({"basics": ["Jane"]}).basics == Basics()
    assert ResumeRecord.from_dict({"basics": ""}).basics is None
    assert ResumeRecord.from_dict("not a mapping") == ResumeRecord()


@pytest.mark.unit
def test_record_is_immutable():
    """Test that records cannot be modified."""
    record = ResumeRecord.from_dict({"basics": {"name": "Jane"}})

    with pytest.raises(FrozenInstanceError):
        record.basics = None
    with pytest.raises(FrozenInstanceError):
        record.basics.name = "John"
