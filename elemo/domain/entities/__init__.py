"""Domain entities and their patch records.

Plain dataclasses; no storage or cache concerns.
"""

from elemo.domain.entities.attachment import Attachment
from elemo.domain.entities.comment import Comment
from elemo.domain.entities.document import Document, DocumentPatch
from elemo.domain.entities.issue import Issue, IssuePatch, IssueRelation
from elemo.domain.entities.label import Label, LabelPatch
from elemo.domain.entities.namespace import (
    Namespace,
    NamespaceDocument,
    NamespacePatch,
    NamespaceProject,
)
from elemo.domain.entities.organization import (
    Organization,
    OrganizationMember,
    OrganizationPatch,
)
from elemo.domain.entities.patch import Patch
from elemo.domain.entities.permission import Permission
from elemo.domain.entities.project import Project, ProjectPatch
from elemo.domain.entities.role import Role, RolePatch
from elemo.domain.entities.todo import Todo, TodoPatch
from elemo.domain.entities.user import User, UserPatch

__all__ = [
    "Attachment",
    "Comment",
    "Document",
    "DocumentPatch",
    "Issue",
    "IssuePatch",
    "IssueRelation",
    "Label",
    "LabelPatch",
    "Namespace",
    "NamespaceDocument",
    "NamespacePatch",
    "NamespaceProject",
    "Organization",
    "OrganizationMember",
    "OrganizationPatch",
    "Patch",
    "Permission",
    "Project",
    "ProjectPatch",
    "Role",
    "RolePatch",
    "Todo",
    "TodoPatch",
    "User",
    "UserPatch",
]
