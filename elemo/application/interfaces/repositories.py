"""Repository interfaces (ports) for the application layer.

Protocols define the storage contracts that both the storage backends and
the cached decorators fulfil, so services cannot tell one from the other.

Conventions shared by every family:
- ``create`` assigns the entity's id (when nil) and timestamps in place.
- Reads of a single entity raise ResourceNotFoundException when absent.
- List reads return an empty list, never None.
- ``update`` applies a patch (only fields that are set) and returns the
  stored entity after the change.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from elemo.domain.entities import (
        Attachment,
        Comment,
        Document,
        DocumentPatch,
        Issue,
        IssuePatch,
        IssueRelation,
        Label,
        LabelPatch,
        Namespace,
        NamespacePatch,
        Organization,
        OrganizationMember,
        OrganizationPatch,
        Permission,
        Project,
        ProjectPatch,
        Role,
        RolePatch,
        Todo,
        TodoPatch,
        User,
        UserPatch,
    )
    from elemo.domain.enums import IssueRelationKind, PermissionKind, SystemRole
    from elemo.domain.value_objects.core import ID


class IAttachmentRepository(Protocol):
    """Protocol for attachment repository (DIP)."""

    async def create(self, belongs_to: ID, attachment: Attachment) -> None:
        """Create attachment on a document or issue."""

    async def get(self, id: ID) -> Attachment:
        """Return attachment by ID."""

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Attachment]:
        """Return attachments of a document or issue."""

    async def update(self, id: ID, name: str) -> Attachment:
        """Rename attachment."""

    async def delete(self, id: ID) -> None:
        """Delete attachment."""


class ICommentRepository(Protocol):
    """Protocol for comment repository (DIP)."""

    async def create(self, belongs_to: ID, comment: Comment) -> None:
        """Create comment on a document or issue."""

    async def get(self, id: ID) -> Comment:
        """Return comment by ID."""

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Comment]:
        """Return comments of a document or issue, oldest first."""

    async def update(self, id: ID, content: str) -> Comment:
        """Replace comment content."""

    async def delete(self, id: ID) -> None:
        """Delete comment."""


class IDocumentRepository(Protocol):
    """Protocol for document repository (DIP)."""

    async def create(self, belongs_to: ID, document: Document) -> None:
        """Create document owned by a user, namespace, or project."""

    async def get(self, id: ID) -> Document:
        """Return document by ID."""

    async def get_by_creator(
        self, created_by: ID, offset: int, limit: int
    ) -> list[Document]:
        """Return documents created by a user."""

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Document]:
        """Return documents belonging to a user, namespace, or project."""

    async def update(self, id: ID, patch: DocumentPatch) -> Document:
        """Apply patch to document."""

    async def delete(self, id: ID) -> None:
        """Delete document."""


class IIssueRepository(Protocol):
    """Protocol for issue repository (DIP)."""

    async def create(self, project_id: ID, issue: Issue) -> None:
        """Create issue in project; assigns the per-project numeric_id."""

    async def get(self, id: ID) -> Issue:
        """Return issue by ID."""

    async def get_all_for_project(
        self, project_id: ID, offset: int, limit: int
    ) -> list[Issue]:
        """Return issues of a project."""

    async def get_all_for_issue(
        self, issue_id: ID, offset: int, limit: int
    ) -> list[Issue]:
        """Return sub-issues of an issue."""

    async def add_watcher(self, issue_id: ID, user_id: ID) -> None:
        """Add user to issue watchers."""

    async def get_watchers(self, issue_id: ID) -> list[User]:
        """Return users watching issue."""

    async def remove_watcher(self, issue_id: ID, user_id: ID) -> None:
        """Remove user from issue watchers."""

    async def add_relation(self, relation: IssueRelation) -> None:
        """Relate two issues."""

    async def get_relations(self, issue_id: ID) -> list[IssueRelation]:
        """Return relations where issue is source or target."""

    async def remove_relation(
        self, source: ID, target: ID, kind: IssueRelationKind
    ) -> None:
        """Remove a relation between two issues."""

    async def update(self, id: ID, patch: IssuePatch) -> Issue:
        """Apply patch to issue."""

    async def delete(self, id: ID) -> None:
        """Delete issue."""


class ILabelRepository(Protocol):
    """Protocol for label repository (DIP)."""

    async def create(self, label: Label) -> None:
        """Create label."""

    async def get(self, id: ID) -> Label:
        """Return label by ID."""

    async def get_all(self, offset: int, limit: int) -> list[Label]:
        """Return labels."""

    async def update(self, id: ID, patch: LabelPatch) -> Label:
        """Apply patch to label."""

    async def attach_to(self, label_id: ID, attach_to: ID) -> None:
        """Attach label to a document or issue."""

    async def detach_from(self, label_id: ID, detach_from: ID) -> None:
        """Detach label from a document or issue."""

    async def delete(self, id: ID) -> None:
        """Delete label and all its attachments."""


class INamespaceRepository(Protocol):
    """Protocol for namespace repository (DIP)."""

    async def create(self, org_id: ID, namespace: Namespace) -> None:
        """Create namespace in organization."""

    async def get(self, id: ID) -> Namespace:
        """Return namespace by ID."""

    async def get_all(self, org_id: ID, offset: int, limit: int) -> list[Namespace]:
        """Return namespaces of organization."""

    async def update(self, id: ID, patch: NamespacePatch) -> Namespace:
        """Apply patch to namespace."""

    async def delete(self, id: ID) -> None:
        """Delete namespace."""


class IOrganizationRepository(Protocol):
    """Protocol for organization repository (DIP)."""

    async def create(self, owner: ID, organization: Organization) -> None:
        """Create organization; owner becomes its first member."""

    async def get(self, id: ID) -> Organization:
        """Return organization by ID."""

    async def get_all(self, user_id: ID, offset: int, limit: int) -> list[Organization]:
        """Return organizations the user is a member of."""

    async def update(self, id: ID, patch: OrganizationPatch) -> Organization:
        """Apply patch to organization."""

    async def add_member(self, org_id: ID, member_id: ID) -> None:
        """Add user to organization members."""

    async def remove_member(self, org_id: ID, member_id: ID) -> None:
        """Remove user from organization members."""

    async def get_members(self, org_id: ID) -> list[OrganizationMember]:
        """Return organization members with their role names."""

    async def add_invitation(self, org_id: ID, user_id: ID) -> None:
        """Record a pending invitation for user."""

    async def remove_invitation(self, org_id: ID, user_id: ID) -> None:
        """Remove a pending invitation."""

    async def get_invitations(self, org_id: ID) -> list[User]:
        """Return users with a pending invitation."""

    async def delete(self, id: ID) -> None:
        """Delete organization."""


class IPermissionRepository(Protocol):
    """Protocol for permission repository (DIP)."""

    async def create(self, permission: Permission) -> None:
        """Grant permission."""

    async def get(self, id: ID) -> Permission:
        """Return permission by ID."""

    async def get_by_subject(self, subject: ID) -> list[Permission]:
        """Return permissions held by subject."""

    async def get_by_target(self, target: ID) -> list[Permission]:
        """Return permissions granted on target."""

    async def get_by_subject_and_target(
        self, subject: ID, target: ID
    ) -> list[Permission]:
        """Return permissions subject holds on target."""

    async def update(self, id: ID, kind: PermissionKind) -> Permission:
        """Change permission kind."""

    async def delete(self, id: ID) -> None:
        """Revoke permission."""

    async def has_permission(
        self, subject: ID, target: ID, *kinds: PermissionKind
    ) -> bool:
        """Return whether subject holds any of kinds (or ALL) on target."""

    async def has_any_relation(self, source: ID, target: ID) -> bool:
        """Return whether source is directly related to target in any way."""

    async def has_system_role(self, source: ID, *roles: SystemRole) -> bool:
        """Return whether source holds any of the system roles."""


class IProjectRepository(Protocol):
    """Protocol for project repository (DIP)."""

    async def create(self, namespace_id: ID, project: Project) -> None:
        """Create project in namespace."""

    async def get(self, id: ID) -> Project:
        """Return project by ID."""

    async def get_by_key(self, key: str) -> Project:
        """Return project by its unique key."""

    async def get_all(
        self, namespace_id: ID, offset: int, limit: int
    ) -> list[Project]:
        """Return projects of namespace."""

    async def update(self, id: ID, patch: ProjectPatch) -> Project:
        """Apply patch to project."""

    async def delete(self, id: ID) -> None:
        """Delete project."""


class IRoleRepository(Protocol):
    """Protocol for role repository (DIP).

    Roles are addressed together with the organization they belong to.
    """

    async def create(self, created_by: ID, belongs_to: ID, role: Role) -> None:
        """Create role; created_by becomes its first member."""

    async def get(self, id: ID, belongs_to: ID) -> Role:
        """Return role by ID within organization."""

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Role]:
        """Return roles of organization."""

    async def update(self, id: ID, belongs_to: ID, patch: RolePatch) -> Role:
        """Apply patch to role."""

    async def add_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None:
        """Add user to role."""

    async def remove_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None:
        """Remove user from role."""

    async def delete(self, id: ID, belongs_to: ID) -> None:
        """Delete role."""


class ITodoRepository(Protocol):
    """Protocol for todo repository (DIP)."""

    async def create(self, todo: Todo) -> None:
        """Create todo."""

    async def get(self, id: ID) -> Todo:
        """Return todo by ID."""

    async def get_by_owner(
        self, owner_id: ID, offset: int, limit: int, completed: bool | None = None
    ) -> list[Todo]:
        """Return todos owned by user; completed=None means both states."""

    async def update(self, id: ID, patch: TodoPatch) -> Todo:
        """Apply patch to todo."""

    async def delete(self, id: ID) -> None:
        """Delete todo."""


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def create(self, user: User) -> None:
        """Create user; email must be unique."""

    async def get(self, id: ID) -> User:
        """Return user by ID."""

    async def get_by_email(self, email: str) -> User:
        """Return user by email."""

    async def get_all(self, offset: int, limit: int) -> list[User]:
        """Return users."""

    async def update(self, id: ID, patch: UserPatch) -> User:
        """Apply patch to user."""

    async def delete(self, id: ID) -> None:
        """Delete user."""
