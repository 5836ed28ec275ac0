"""End-to-end scenarios: cached decorators over memory storage.

The cache is the recording backend, so every test can count storage reads
and inspect exactly what the cache saw.
"""

from unittest.mock import AsyncMock

import pytest
from pydantic import TypeAdapter

from elemo.domain.entities import (
    Attachment,
    Comment,
    Document,
    DocumentPatch,
    Issue,
    IssueRelation,
    Label,
    Namespace,
    Organization,
    OrganizationPatch,
    Permission,
    Project,
    ProjectPatch,
    Role,
    Todo,
    TodoPatch,
    User,
    UserPatch,
)
from elemo.domain.enums import IssueRelationKind, PermissionKind, ResourceType
from elemo.domain.exceptions import ResourceNotFoundException
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import CacheDeleteException

U1 = ID("U1", ResourceType.USER)
D1 = ID("D1", ResourceType.DOCUMENT)
X1 = ID("X1", ResourceType.DOCUMENT)
O1 = ID("O1", ResourceType.ORGANIZATION)


def spy(monkeypatch: pytest.MonkeyPatch, repo, name: str) -> AsyncMock:
    """Wrap a storage method so its awaits can be counted."""
    mock = AsyncMock(wraps=getattr(repo, name))
    monkeypatch.setattr(repo, name, mock)
    return mock


async def _user(storage, id: ID = U1) -> User:
    user = User(id=id, username=id.value.lower(), email=f"{id.value.lower()}@elemo.app")
    await storage.users.create(user)
    return user


async def test_read_through_then_hit(storage, repos, backend, monkeypatch) -> None:
    await _user(storage)
    await storage.documents.create(U1, Document(id=D1, name="Spec", created_by=U1))
    reads = spy(monkeypatch, storage.documents, "get")

    first = await repos.documents.get(D1)
    assert reads.await_count == 1
    assert backend.ops("set") == ["Document:D1"]

    second = await repos.documents.get(D1)
    assert reads.await_count == 1
    assert backend.ops("set") == ["Document:D1"]
    assert first == second


async def test_create_invalidation(storage, repos, backend, monkeypatch) -> None:
    await _user(storage)
    await storage.documents.create(U1, Document(id=X1, name="Spec", created_by=U1))
    reads = spy(monkeypatch, storage.attachments, "get_all_belongs_to")

    assert await repos.attachments.get_all_belongs_to(X1, 0, 10) == []
    assert "Attachment:GetAllBelongsTo:X1:0:10" in backend.store

    attachment = Attachment(
        id=ID("A1", ResourceType.ATTACHMENT), name="a.png", file_id="f1", created_by=U1
    )
    await repos.attachments.create(X1, attachment)
    assert backend.ops("keys") == ["Attachment:GetAllBelongsTo:X1:*", "Issue:*", "Document:*"]
    assert "Attachment:GetAllBelongsTo:X1:0:10" not in backend.store
    assert "Attachment:A1" not in backend.store

    listed = await repos.attachments.get_all_belongs_to(X1, 0, 10)
    assert reads.await_count == 2
    assert [a.id for a in listed] == [attachment.id]


async def test_update_error_leaves_cache_intact(storage, repos, backend, monkeypatch) -> None:
    await _user(storage)
    await storage.documents.create(U1, Document(id=D1, name="Spec", created_by=U1))
    before = await repos.documents.get(D1)
    snapshot = dict(backend.store)
    monkeypatch.setattr(
        storage.documents,
        "update",
        AsyncMock(side_effect=ResourceNotFoundException("Document", "D1")),
    )
    backend.calls.clear()

    with pytest.raises(ResourceNotFoundException):
        await repos.documents.update(D1, DocumentPatch(name="x"))
    assert backend.calls == []
    assert backend.store == snapshot

    reads = spy(monkeypatch, storage.documents, "get")
    assert await repos.documents.get(D1) == before
    reads.assert_not_awaited()


async def test_cache_error_after_storage_write(storage, repos, backend) -> None:
    await _user(storage)
    await storage.organizations.create(U1, Organization(id=O1, name="Acme", email="hi@acme.io"))
    await repos.organizations.get_all(U1, 0, 10)
    backend.fail("delete", "Organization:GetAll:*")

    with pytest.raises(CacheDeleteException):
        await repos.organizations.update(O1, OrganizationPatch(name="Acme Inc"))

    assert (await storage.organizations.get(O1)).name == "Acme Inc"
    cached = TypeAdapter(Organization).validate_json(backend.store["Organization:O1"])
    assert cached.name == "Acme Inc"


async def test_permission_operations_never_touch_cache(storage, repos, backend) -> None:
    await _user(storage)
    await storage.documents.create(U1, Document(id=D1, name="Spec", created_by=U1))
    permission = Permission(
        id=ID("P1", ResourceType.PERMISSION),
        kind=PermissionKind.READ,
        subject=U1,
        target=D1,
    )

    await repos.permissions.create(permission)
    assert backend.store == {}
    assert (await repos.permissions.get(permission.id)).kind is PermissionKind.READ
    assert backend.store == {}
    assert [p.id for p in await repos.permissions.get_by_subject(U1)] == [permission.id]
    assert backend.store == {}
    assert await repos.permissions.has_permission(U1, D1, PermissionKind.READ)
    assert backend.store == {}
    await repos.permissions.delete(permission.id)
    assert backend.store == {}
    assert backend.calls == []


async def test_pattern_deletion_scope(coordinator, backend) -> None:
    for key in (
        "Todo:GetByOwner:U1:0:10:nil",
        "Todo:GetByOwner:U1:0:10:true",
        "Todo:GetByOwner:U2:0:10:nil",
    ):
        backend.store[key] = b"[]"
    await coordinator.delete_pattern("Todo:GetByOwner:*")
    assert backend.store == {}


async def test_create_does_not_prepopulate_point_key(storage, repos, backend) -> None:
    await _user(storage)
    document = Document(name="Spec", created_by=U1)
    await repos.documents.create(U1, document)
    assert f"Document:{document.id}" not in backend.store
    assert backend.ops("set") == []


async def test_comment_on_document_drops_cached_document(storage, repos, backend) -> None:
    await _user(storage)
    await storage.documents.create(U1, Document(id=D1, name="Spec", created_by=U1))
    assert (await repos.documents.get(D1)).comments == []

    comment = Comment(content="LGTM", created_by=U1)
    await repos.comments.create(D1, comment)
    assert "Document:D1" not in backend.store
    assert (await repos.documents.get(D1)).comments == [comment.id]


async def test_label_attach_drops_cached_document(storage, repos) -> None:
    await _user(storage)
    await storage.documents.create(U1, Document(id=D1, name="Spec", created_by=U1))
    label = Label(name="draft")
    await repos.labels.create(label)
    await repos.documents.get(D1)

    await repos.labels.attach_to(label.id, D1)
    assert (await repos.documents.get(D1)).labels == [label.id]
    await repos.labels.detach_from(label.id, D1)
    assert (await repos.documents.get(D1)).labels == []


async def test_project_rename_refreshes_namespace_view(storage, repos) -> None:
    await _user(storage)
    org = Organization(name="Acme", email="hi@acme.io")
    await repos.organizations.create(U1, org)
    namespace = Namespace(name="eng")
    await repos.namespaces.create(org.id, namespace)
    project = Project(key="ELM", name="Elemo")
    await repos.projects.create(namespace.id, project)
    assert [p.name for p in (await repos.namespaces.get(namespace.id)).projects] == ["Elemo"]
    assert (await repos.projects.get_by_key("ELM")).id == project.id

    await repos.projects.update(project.id, ProjectPatch(key="ELX", name="Elemo X"))
    assert [p.name for p in (await repos.namespaces.get(namespace.id)).projects] == [
        "Elemo X"
    ]
    with pytest.raises(ResourceNotFoundException):
        await repos.projects.get_by_key("ELM")
    assert (await repos.projects.get_by_key("ELX")).id == project.id


async def test_user_email_change_invalidates_old_email(storage, repos) -> None:
    await _user(storage)
    assert (await repos.users.get_by_email("u1@elemo.app")).id == U1

    await repos.users.update(U1, UserPatch(email="ada@elemo.app"))
    with pytest.raises(ResourceNotFoundException):
        await repos.users.get_by_email("u1@elemo.app")
    assert (await repos.users.get(U1)).email == "ada@elemo.app"


async def test_role_membership_refreshes_member_listing(storage, repos) -> None:
    await _user(storage)
    guest = await _user(storage, ID("U2", ResourceType.USER))
    org = Organization(name="Acme", email="hi@acme.io")
    await repos.organizations.create(U1, org)
    await repos.organizations.add_member(org.id, guest.id)
    role = Role(name="Dev")
    await repos.roles.create(U1, org.id, role)

    members = {m.id: m.roles for m in await repos.organizations.get_members(org.id)}
    assert members == {U1: ["Dev"], guest.id: []}

    await repos.roles.add_member(role.id, guest.id, org.id)
    members = {m.id: m.roles for m in await repos.organizations.get_members(org.id)}
    assert members[guest.id] == ["Dev"]
    assert (await repos.roles.get(role.id, org.id)).members == [U1, guest.id]


async def test_todo_completion_filters_stay_coherent(storage, repos) -> None:
    await _user(storage)
    todo = Todo(title="Ship", owned_by=U1, created_by=U1)
    await repos.todos.create(todo)
    assert len(await repos.todos.get_by_owner(U1, 0, 10, completed=False)) == 1
    assert await repos.todos.get_by_owner(U1, 0, 10, completed=True) == []

    await repos.todos.update(todo.id, TodoPatch(completed=True))
    assert await repos.todos.get_by_owner(U1, 0, 10, completed=False) == []
    assert len(await repos.todos.get_by_owner(U1, 0, 10, completed=True)) == 1


async def test_issue_watchers_and_children(storage, repos) -> None:
    await _user(storage)
    org = Organization(name="Acme", email="hi@acme.io")
    await repos.organizations.create(U1, org)
    namespace = Namespace(name="eng")
    await repos.namespaces.create(org.id, namespace)
    project = Project(key="ELM", name="Elemo")
    await repos.projects.create(namespace.id, project)
    epic = Issue(title="Epic", reported_by=U1)
    await repos.issues.create(project.id, epic)
    assert await repos.issues.get_all_for_issue(epic.id, 0, 10) == []

    story = Issue(title="Story", reported_by=U1, parent=epic.id)
    await repos.issues.create(project.id, story)
    assert [i.id for i in await repos.issues.get_all_for_issue(epic.id, 0, 10)] == [
        story.id
    ]
    assert (await repos.projects.get(project.id)).issues == [epic.id, story.id]

    await repos.issues.get(epic.id)
    await repos.issues.add_watcher(epic.id, U1)
    assert (await repos.issues.get(epic.id)).watchers == [U1]
    assert [u.id for u in await repos.issues.get_watchers(epic.id)] == [U1]

    await repos.users.update(U1, UserPatch(first_name="Ada"))
    assert (await repos.issues.get_watchers(epic.id))[0].first_name == "Ada"


async def _project(repos) -> Project:
    org = Organization(name="Acme", email="hi@acme.io")
    await repos.organizations.create(U1, org)
    namespace = Namespace(name="eng")
    await repos.namespaces.create(org.id, namespace)
    project = Project(key="ELM", name="Elemo")
    await repos.projects.create(namespace.id, project)
    return project


async def test_issue_delete_drops_related_issue_views(storage, repos) -> None:
    await _user(storage)
    project = await _project(repos)
    blocker = Issue(title="Blocker", reported_by=U1)
    blocked = Issue(title="Blocked", reported_by=U1)
    await repos.issues.create(project.id, blocker)
    await repos.issues.create(project.id, blocked)
    await repos.issues.add_relation(
        IssueRelation(source=blocker.id, target=blocked.id, kind=IssueRelationKind.BLOCKS)
    )
    assert len((await repos.issues.get(blocked.id)).relations) == 1
    assert len(await repos.issues.get_relations(blocked.id)) == 1

    await repos.issues.delete(blocker.id)

    assert (await storage.issues.get(blocked.id)).relations == []
    assert (await repos.issues.get(blocked.id)).relations == []
    assert await repos.issues.get_relations(blocked.id) == []


async def test_user_delete_drops_issue_watchers(storage, repos) -> None:
    await _user(storage)
    watcher = await _user(storage, ID("U2", ResourceType.USER))
    project = await _project(repos)
    issue = Issue(title="Bug", reported_by=U1)
    await repos.issues.create(project.id, issue)
    await repos.issues.add_watcher(issue.id, watcher.id)
    assert (await repos.issues.get(issue.id)).watchers == [watcher.id]
    assert len(await repos.issues.get_all_for_project(project.id, 0, 10)) == 1

    await repos.users.delete(watcher.id)

    assert (await repos.issues.get(issue.id)).watchers == []
    assert (await repos.issues.get_all_for_project(project.id, 0, 10))[0].watchers == []


async def test_update_is_idempotent(storage, repos, backend) -> None:
    await _user(storage)
    await storage.documents.create(U1, Document(id=D1, name="Spec", created_by=U1))

    first = await repos.documents.update(D1, DocumentPatch(name="Spec v2"))
    first_patterns = backend.ops("keys")
    backend.calls.clear()
    second = await repos.documents.update(D1, DocumentPatch(name="Spec v2"))

    assert first.name == second.name
    assert backend.ops("keys") == first_patterns
