"""In-memory graph storage backend.

Used for development and tests; implements every repository protocol
over one shared MemoryGraph.
"""

from elemo.infrastructure.persistence.memory.attachment_repo import (
    MemoryAttachmentRepository,
)
from elemo.infrastructure.persistence.memory.comment_repo import MemoryCommentRepository
from elemo.infrastructure.persistence.memory.document_repo import (
    MemoryDocumentRepository,
)
from elemo.infrastructure.persistence.memory.graph import Edge, MemoryGraph, paginate
from elemo.infrastructure.persistence.memory.issue_repo import MemoryIssueRepository
from elemo.infrastructure.persistence.memory.label_repo import MemoryLabelRepository
from elemo.infrastructure.persistence.memory.namespace_repo import (
    MemoryNamespaceRepository,
)
from elemo.infrastructure.persistence.memory.organization_repo import (
    MemoryOrganizationRepository,
)
from elemo.infrastructure.persistence.memory.permission_repo import (
    MemoryPermissionRepository,
)
from elemo.infrastructure.persistence.memory.project_repo import MemoryProjectRepository
from elemo.infrastructure.persistence.memory.role_repo import MemoryRoleRepository
from elemo.infrastructure.persistence.memory.todo_repo import MemoryTodoRepository
from elemo.infrastructure.persistence.memory.user_repo import MemoryUserRepository

__all__ = [
    "Edge",
    "MemoryAttachmentRepository",
    "MemoryCommentRepository",
    "MemoryDocumentRepository",
    "MemoryGraph",
    "MemoryIssueRepository",
    "MemoryLabelRepository",
    "MemoryNamespaceRepository",
    "MemoryOrganizationRepository",
    "MemoryPermissionRepository",
    "MemoryProjectRepository",
    "MemoryRoleRepository",
    "MemoryTodoRepository",
    "MemoryUserRepository",
    "paginate",
]
