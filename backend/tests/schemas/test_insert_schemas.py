"""Insert schemas — required fields, defaults, and every-field error reporting."""

import pytest

from app.core.errors import ValidationError
from app.schemas.message import InsertMessage
from app.schemas.project import InsertProject, Project
from app.schemas.skill import InsertSkill
from app.schemas.validate import validate_payload


def _project_payload(**overrides) -> dict:
    payload = {
        "title": "Semantic Code Search",
        "shortDescription": "Natural language search.",
        "problemStatement": "Keyword search lacks context.",
        "methodology": "Fine-tuned CodeBERT.",
        "outcome": "Relevance up 60%.",
        "techStack": ["Python", "FastAPI"],
    }
    payload.update(overrides)
    return payload


# --- Message ------------------------------------------------------------------

def test_valid_message_passes():
    msg = validate_payload(
        InsertMessage,
        {"name": "Jane", "email": "jane@example.com", "message": "Hello"},
    )
    assert (msg.name, msg.email, msg.message) == ("Jane", "jane@example.com", "Hello")


@pytest.mark.parametrize("payload, field", [
    ({"name": "", "email": "jane@example.com", "message": "Hello"}, "name"),
    ({"name": "   ", "email": "jane@example.com", "message": "Hello"}, "name"),
    ({"name": "Jane", "email": "not-an-email", "message": "Hello"}, "email"),
    ({"name": "Jane", "email": "jane@", "message": "Hello"}, "email"),
    ({"name": "Jane", "email": "jane@example.com", "message": ""}, "message"),
    ({"email": "jane@example.com", "message": "Hello"}, "name"),
])
def test_invalid_message_names_offending_field(payload, field):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(InsertMessage, payload)
    assert exc_info.value.fields == [field]


def test_every_failing_message_field_is_reported():
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(InsertMessage, {"name": "", "email": "nope", "message": ""})
    assert exc_info.value.fields == ["name", "email", "message"]
    reasons = {e.field: e.message for e in exc_info.value.errors}
    assert reasons["name"] == "Name is required"
    assert reasons["message"] == "Message is required"
    assert "email" in reasons["email"]


def test_message_email_domain_is_lowercased():
    msg = validate_payload(
        InsertMessage,
        {"name": "Jane", "email": "Jane.Doe@EXAMPLE.Com", "message": "Hi"},
    )
    assert msg.email == "Jane.Doe@example.com"


def test_message_strips_surrounding_whitespace():
    msg = validate_payload(
        InsertMessage,
        {"name": "  Jane ", "email": "jane@example.com", "message": " Hi "},
    )
    assert msg.name == "Jane"
    assert msg.message == "Hi"


def test_unknown_fields_are_dropped():
    msg = validate_payload(InsertMessage, {
        "name": "Jane", "email": "jane@example.com", "message": "Hello",
        "id": 99, "createdAt": "2020-01-01",
    })
    assert "id" not in msg.model_dump()
    assert "created_at" not in msg.model_dump()


@pytest.mark.parametrize("payload", [None, [], "text", 5])
def test_non_object_payload_fails_on_body(payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(InsertMessage, payload)
    assert exc_info.value.field == "body"


# --- Skill --------------------------------------------------------------------

def test_skill_proficiency_defaults_to_50_when_absent():
    skill = validate_payload(InsertSkill, {"name": "SQL", "category": "Data"})
    assert skill.proficiency == 50


def test_skill_proficiency_defaults_to_50_when_null():
    skill = validate_payload(
        InsertSkill, {"name": "SQL", "category": "Data", "proficiency": None},
    )
    assert skill.proficiency == 50


def test_skill_proficiency_zero_is_kept():
    skill = validate_payload(
        InsertSkill, {"name": "SQL", "category": "Data", "proficiency": 0},
    )
    assert skill.proficiency == 0


def test_skill_numeric_string_is_coerced():
    skill = validate_payload(
        InsertSkill, {"name": "SQL", "category": "Data", "proficiency": "80"},
    )
    assert skill.proficiency == 80


@pytest.mark.parametrize("value", ["high", "eighty", [], {}, 101, -1, True, False])
def test_skill_rejects_non_numeric_or_out_of_range_proficiency(value):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(
            InsertSkill, {"name": "SQL", "category": "Data", "proficiency": value},
        )
    assert exc_info.value.fields == ["proficiency"]


def test_skill_requires_name_and_category():
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(InsertSkill, {"proficiency": 70})
    assert set(exc_info.value.fields) == {"name", "category"}


# --- Project ------------------------------------------------------------------

def test_project_accepts_camel_case_payload():
    project = validate_payload(InsertProject, _project_payload())
    assert project.short_description == "Natural language search."
    assert project.tech_stack == ["Python", "FastAPI"]
    assert project.github_url is None


def test_project_accepts_snake_case_payload():
    payload = {
        "title": "T", "short_description": "S", "problem_statement": "P",
        "methodology": "M", "outcome": "O", "tech_stack": ["Go"],
    }
    project = validate_payload(InsertProject, payload)
    assert project.tech_stack == ["Go"]


def test_project_tech_stack_defaults_to_empty():
    payload = _project_payload()
    del payload["techStack"]
    assert validate_payload(InsertProject, payload).tech_stack == []


def test_project_blank_url_becomes_none():
    project = validate_payload(InsertProject, _project_payload(demoUrl=""))
    assert project.demo_url is None


def test_project_reports_every_missing_field():
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(InsertProject, {"title": "Only a title"})
    assert set(exc_info.value.fields) == {
        "shortDescription", "problemStatement", "methodology", "outcome",
    }


def test_project_tech_stack_must_be_strings():
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(InsertProject, _project_payload(techStack=[1, 2]))
    assert exc_info.value.field.startswith("techStack")


def test_project_read_schema_decodes_stored_stack_text():
    project = Project.model_validate({
        "id": 1, "title": "T", "short_description": "S",
        "problem_statement": "P", "methodology": "M", "outcome": "O",
        "tech_stack": "not json", "created_at": "2026-01-01T00:00:00Z",
    })
    assert project.tech_stack == []


def test_project_read_schema_serializes_camel_case():
    project = Project.model_validate({
        "id": 1, "title": "T", "short_description": "S",
        "problem_statement": "P", "methodology": "M", "outcome": "O",
        "tech_stack": '["Python"]', "created_at": "2026-01-01T00:00:00Z",
    })
    dumped = project.model_dump(mode="json", by_alias=True)
    assert dumped["techStack"] == ["Python"]
    assert dumped["createdAt"].startswith("2026-01-01T00:00:00")
