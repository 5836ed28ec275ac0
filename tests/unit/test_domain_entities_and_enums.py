"""Tests for domain entities, patches and enums."""

from datetime import UTC, datetime

import pytest

from elemo.domain.entities import (
    Document,
    IssueRelation,
    Permission,
    Project,
    Todo,
    TodoPatch,
    User,
)
from elemo.domain.enums import IssueRelationKind, PermissionKind, ResourceType
from elemo.domain.exceptions import ValidationException
from elemo.domain.value_objects.core import ID

U1 = ID("U1", ResourceType.USER)


def test_resource_type_values_are_canonical_tags() -> None:
    values = ResourceType.values()
    assert "Document" in values
    assert "Organization" in values
    assert ResourceType("Todo") is ResourceType.TODO


def test_new_entity_has_nil_id() -> None:
    document = Document(name="Spec", created_by=U1)
    assert document.id.is_nil()
    assert document.id.type is ResourceType.DOCUMENT


def test_user_requires_valid_email() -> None:
    with pytest.raises(ValidationException) as exc_info:
        User(username="u1", email="not-an-email")
    assert exc_info.value.details == {"field": "email"}


@pytest.mark.parametrize("key", ["ab", "abc", "A", "TOOLONGPROJECTKEY1"])
def test_project_key_format(key: str) -> None:
    with pytest.raises(ValidationException):
        Project(key=key, name="Project")


def test_project_key_accepted() -> None:
    assert Project(key="ELM", name="Elemo").key == "ELM"


def test_permission_subject_and_target_must_differ() -> None:
    with pytest.raises(ValidationException):
        Permission(kind=PermissionKind.READ, subject=U1, target=U1)


def test_permission_all_grants_every_kind() -> None:
    target = ID("D1", ResourceType.DOCUMENT)
    permission = Permission(kind=PermissionKind.ALL, subject=U1, target=target)
    assert permission.grants(PermissionKind.DELETE)
    read_only = Permission(kind=PermissionKind.READ, subject=U1, target=target)
    assert read_only.grants(PermissionKind.READ)
    assert not read_only.grants(PermissionKind.WRITE)


def test_issue_relation_cannot_target_itself() -> None:
    issue = ID("I1", ResourceType.ISSUE)
    with pytest.raises(ValidationException):
        IssueRelation(source=issue, target=issue, kind=IssueRelationKind.BLOCKS)


def test_patch_changes_only_set_fields() -> None:
    patch = TodoPatch(title="Ship", completed=False)
    assert patch.changes() == {"title": "Ship", "completed": False}
    assert not patch.is_empty()
    assert TodoPatch().is_empty()


def test_naive_due_date_is_treated_as_utc() -> None:
    todo = Todo(
        title="Ship", owned_by=U1, created_by=U1, due_date=datetime(2026, 1, 1, 12, 0)
    )
    assert todo.due_date == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
