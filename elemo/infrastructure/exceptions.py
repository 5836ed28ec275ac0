"""Infrastructure exceptions for storage, cache, and wiring.

The three families are disjoint: a storage failure is never reported as
a cache failure and vice versa. All extend ElemoException so callers can
handle them uniformly at the outer edge.
"""

from typing import Any, ClassVar

from elemo.domain.enums import ResourceType
from elemo.domain.exceptions import ElemoException


class StorageException(ElemoException):
    """Base exception for storage repository operations."""


class StorageOperationException(StorageException):
    """A family-specific storage operation failed.

    Subclasses pin ``resource_type`` and ``operation`` so callers can tell
    e.g. a failed document create from a failed document delete by class.
    """

    resource_type: ClassVar[ResourceType]
    operation: ClassVar[str]

    def __init__(self, reason: str | None = None, **details: Any) -> None:
        """Initialize with an optional reason and extra context.

        Args:
            reason: Optional human-readable cause.
            **details: Extra context (e.g. id, belongs_to).
        """
        message = f"{self.resource_type.value} {self.operation} failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            f"{self.resource_type.name}_{self.operation.upper()}_ERROR",
            {"resource_type": self.resource_type.value, **details},
        )


# Attachment


class AttachmentCreateException(StorageOperationException):
    resource_type = ResourceType.ATTACHMENT
    operation = "create"


class AttachmentReadException(StorageOperationException):
    resource_type = ResourceType.ATTACHMENT
    operation = "read"


class AttachmentUpdateException(StorageOperationException):
    resource_type = ResourceType.ATTACHMENT
    operation = "update"


class AttachmentDeleteException(StorageOperationException):
    resource_type = ResourceType.ATTACHMENT
    operation = "delete"


# Comment


class CommentCreateException(StorageOperationException):
    resource_type = ResourceType.COMMENT
    operation = "create"


class CommentReadException(StorageOperationException):
    resource_type = ResourceType.COMMENT
    operation = "read"


class CommentUpdateException(StorageOperationException):
    resource_type = ResourceType.COMMENT
    operation = "update"


class CommentDeleteException(StorageOperationException):
    resource_type = ResourceType.COMMENT
    operation = "delete"


# Document


class DocumentCreateException(StorageOperationException):
    resource_type = ResourceType.DOCUMENT
    operation = "create"


class DocumentReadException(StorageOperationException):
    resource_type = ResourceType.DOCUMENT
    operation = "read"


class DocumentUpdateException(StorageOperationException):
    resource_type = ResourceType.DOCUMENT
    operation = "update"


class DocumentDeleteException(StorageOperationException):
    resource_type = ResourceType.DOCUMENT
    operation = "delete"


# Issue


class IssueCreateException(StorageOperationException):
    resource_type = ResourceType.ISSUE
    operation = "create"


class IssueReadException(StorageOperationException):
    resource_type = ResourceType.ISSUE
    operation = "read"


class IssueUpdateException(StorageOperationException):
    resource_type = ResourceType.ISSUE
    operation = "update"


class IssueDeleteException(StorageOperationException):
    resource_type = ResourceType.ISSUE
    operation = "delete"


class IssueAddWatcherException(StorageOperationException):
    resource_type = ResourceType.ISSUE
    operation = "add_watcher"


class IssueRemoveWatcherException(StorageOperationException):
    resource_type = ResourceType.ISSUE
    operation = "remove_watcher"


class IssueAddRelationException(StorageOperationException):
    resource_type = ResourceType.ISSUE
    operation = "add_relation"


class IssueRemoveRelationException(StorageOperationException):
    resource_type = ResourceType.ISSUE
    operation = "remove_relation"


# Label


class LabelCreateException(StorageOperationException):
    resource_type = ResourceType.LABEL
    operation = "create"


class LabelReadException(StorageOperationException):
    resource_type = ResourceType.LABEL
    operation = "read"


class LabelUpdateException(StorageOperationException):
    resource_type = ResourceType.LABEL
    operation = "update"


class LabelDeleteException(StorageOperationException):
    resource_type = ResourceType.LABEL
    operation = "delete"


class LabelAttachException(StorageOperationException):
    resource_type = ResourceType.LABEL
    operation = "attach"


class LabelDetachException(StorageOperationException):
    resource_type = ResourceType.LABEL
    operation = "detach"


# Namespace


class NamespaceCreateException(StorageOperationException):
    resource_type = ResourceType.NAMESPACE
    operation = "create"


class NamespaceReadException(StorageOperationException):
    resource_type = ResourceType.NAMESPACE
    operation = "read"


class NamespaceUpdateException(StorageOperationException):
    resource_type = ResourceType.NAMESPACE
    operation = "update"


class NamespaceDeleteException(StorageOperationException):
    resource_type = ResourceType.NAMESPACE
    operation = "delete"


# Organization


class OrganizationCreateException(StorageOperationException):
    resource_type = ResourceType.ORGANIZATION
    operation = "create"


class OrganizationReadException(StorageOperationException):
    resource_type = ResourceType.ORGANIZATION
    operation = "read"


class OrganizationUpdateException(StorageOperationException):
    resource_type = ResourceType.ORGANIZATION
    operation = "update"


class OrganizationDeleteException(StorageOperationException):
    resource_type = ResourceType.ORGANIZATION
    operation = "delete"


class OrganizationAddMemberException(StorageOperationException):
    resource_type = ResourceType.ORGANIZATION
    operation = "add_member"


class OrganizationRemoveMemberException(StorageOperationException):
    resource_type = ResourceType.ORGANIZATION
    operation = "remove_member"


class OrganizationAddInvitationException(StorageOperationException):
    resource_type = ResourceType.ORGANIZATION
    operation = "add_invitation"


class OrganizationRemoveInvitationException(StorageOperationException):
    resource_type = ResourceType.ORGANIZATION
    operation = "remove_invitation"


# Permission


class PermissionCreateException(StorageOperationException):
    resource_type = ResourceType.PERMISSION
    operation = "create"


class PermissionReadException(StorageOperationException):
    resource_type = ResourceType.PERMISSION
    operation = "read"


class PermissionUpdateException(StorageOperationException):
    resource_type = ResourceType.PERMISSION
    operation = "update"


class PermissionDeleteException(StorageOperationException):
    resource_type = ResourceType.PERMISSION
    operation = "delete"


# Project


class ProjectCreateException(StorageOperationException):
    resource_type = ResourceType.PROJECT
    operation = "create"


class ProjectReadException(StorageOperationException):
    resource_type = ResourceType.PROJECT
    operation = "read"


class ProjectUpdateException(StorageOperationException):
    resource_type = ResourceType.PROJECT
    operation = "update"


class ProjectDeleteException(StorageOperationException):
    resource_type = ResourceType.PROJECT
    operation = "delete"


# Role


class RoleCreateException(StorageOperationException):
    resource_type = ResourceType.ROLE
    operation = "create"


class RoleReadException(StorageOperationException):
    resource_type = ResourceType.ROLE
    operation = "read"


class RoleUpdateException(StorageOperationException):
    resource_type = ResourceType.ROLE
    operation = "update"


class RoleDeleteException(StorageOperationException):
    resource_type = ResourceType.ROLE
    operation = "delete"


class RoleAddMemberException(StorageOperationException):
    resource_type = ResourceType.ROLE
    operation = "add_member"


class RoleRemoveMemberException(StorageOperationException):
    resource_type = ResourceType.ROLE
    operation = "remove_member"


# Todo


class TodoCreateException(StorageOperationException):
    resource_type = ResourceType.TODO
    operation = "create"


class TodoReadException(StorageOperationException):
    resource_type = ResourceType.TODO
    operation = "read"


class TodoUpdateException(StorageOperationException):
    resource_type = ResourceType.TODO
    operation = "update"


class TodoDeleteException(StorageOperationException):
    resource_type = ResourceType.TODO
    operation = "delete"


# User


class UserCreateException(StorageOperationException):
    resource_type = ResourceType.USER
    operation = "create"


class UserReadException(StorageOperationException):
    resource_type = ResourceType.USER
    operation = "read"


class UserUpdateException(StorageOperationException):
    resource_type = ResourceType.USER
    operation = "update"


class UserDeleteException(StorageOperationException):
    resource_type = ResourceType.USER
    operation = "delete"


class CacheException(ElemoException):
    """Base exception for cache coordinator operations.

    The backend error that triggered it is kept as ``__cause__``.
    """

    operation: ClassVar[str] = "access"

    def __init__(self, key: str, reason: str | None = None) -> None:
        """Initialize with the key (or pattern) being processed.

        Args:
            key: Cache key or pattern the operation was applied to.
            reason: Optional description of the underlying failure.
        """
        details: dict[str, Any] = {"key": key}
        if reason:
            details["reason"] = reason
        super().__init__(
            f"Failed to {self.operation} cache key: {key}",
            f"CACHE_{self.operation.upper()}_ERROR",
            details,
        )
        self.key = key


class CacheReadException(CacheException):
    """Reading a cache entry failed for a reason other than a miss."""

    operation = "read"


class CacheWriteException(CacheException):
    """Writing a cache entry failed."""

    operation = "write"


class CacheDeleteException(CacheException):
    """Deleting a cache entry failed for a reason other than a miss."""

    operation = "delete"


class WiringException(ElemoException):
    """A component was constructed with a missing or invalid collaborator.

    Raised at construction time, never from a repository operation.
    """

    default_message: ClassVar[str] = "invalid wiring"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message, "WIRING_ERROR")


class InvalidDriverException(WiringException):
    default_message = "invalid database driver"


class InvalidPoolException(WiringException):
    default_message = "invalid connection pool"


class InvalidDatabaseException(WiringException):
    default_message = "invalid database"


class InvalidRepositoryException(WiringException):
    default_message = "invalid repository"


class InvalidConfigException(WiringException):
    default_message = "invalid configuration"


class NoDriverException(WiringException):
    default_message = "no database driver provided"


class NoPoolException(WiringException):
    default_message = "no connection pool provided"


class NoClientException(WiringException):
    default_message = "no cache client provided"


class NoBucketException(WiringException):
    default_message = "no object storage bucket provided"


class NoLoggerException(WiringException):
    default_message = "no logger provided"


class NoTracerException(WiringException):
    default_message = "no tracer provided"
