"""Cached repository decorators, one per entity family.

Each decorator implements its family's storage contract, so a service
holds either the storage repository or its cached decorator.
"""

from elemo.infrastructure.cache.repositories.attachment_repo import (
    CachedAttachmentRepository,
)
from elemo.infrastructure.cache.repositories.base import CachedRepository
from elemo.infrastructure.cache.repositories.comment_repo import CachedCommentRepository
from elemo.infrastructure.cache.repositories.document_repo import (
    CachedDocumentRepository,
)
from elemo.infrastructure.cache.repositories.issue_repo import CachedIssueRepository
from elemo.infrastructure.cache.repositories.label_repo import CachedLabelRepository
from elemo.infrastructure.cache.repositories.namespace_repo import (
    CachedNamespaceRepository,
)
from elemo.infrastructure.cache.repositories.organization_repo import (
    CachedOrganizationRepository,
)
from elemo.infrastructure.cache.repositories.permission_repo import (
    CachedPermissionRepository,
)
from elemo.infrastructure.cache.repositories.project_repo import CachedProjectRepository
from elemo.infrastructure.cache.repositories.role_repo import CachedRoleRepository
from elemo.infrastructure.cache.repositories.todo_repo import CachedTodoRepository
from elemo.infrastructure.cache.repositories.user_repo import CachedUserRepository

__all__ = [
    "CachedAttachmentRepository",
    "CachedCommentRepository",
    "CachedDocumentRepository",
    "CachedIssueRepository",
    "CachedLabelRepository",
    "CachedNamespaceRepository",
    "CachedOrganizationRepository",
    "CachedPermissionRepository",
    "CachedProjectRepository",
    "CachedRepository",
    "CachedRoleRepository",
    "CachedTodoRepository",
    "CachedUserRepository",
]
