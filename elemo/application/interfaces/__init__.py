"""Application interfaces (ports) implemented by infrastructure."""

from elemo.application.interfaces.repositories import (
    IAttachmentRepository,
    ICommentRepository,
    IDocumentRepository,
    IIssueRepository,
    ILabelRepository,
    INamespaceRepository,
    IOrganizationRepository,
    IPermissionRepository,
    IProjectRepository,
    IRoleRepository,
    ITodoRepository,
    IUserRepository,
)

__all__ = [
    "IAttachmentRepository",
    "ICommentRepository",
    "IDocumentRepository",
    "IIssueRepository",
    "ILabelRepository",
    "INamespaceRepository",
    "IOrganizationRepository",
    "IPermissionRepository",
    "IProjectRepository",
    "IRoleRepository",
    "ITodoRepository",
    "IUserRepository",
]
