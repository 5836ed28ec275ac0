"""Domain enumerations for the elemo persistence layer.

Enums represent fixed sets of domain values. Their string values are the
wire form used in cache keys and serialized entities.
"""

from enum import Enum


class ResourceType(str, Enum):
    """Resource-type tag carried by every identifier.

    The value is the canonical tag used as the first component of every
    cache key (e.g. ``Document:<id>``).
    """

    USER = "User"
    ORGANIZATION = "Organization"
    NAMESPACE = "Namespace"
    PROJECT = "Project"
    DOCUMENT = "Document"
    ATTACHMENT = "Attachment"
    LABEL = "Label"
    TODO = "Todo"
    ISSUE = "Issue"
    ROLE = "Role"
    PERMISSION = "Permission"
    USER_TOKEN = "UserToken"
    COMMENT = "Comment"
    RESOURCE_TYPE = "ResourceType"

    @classmethod
    def values(cls) -> list[str]:
        """Return all canonical tags as strings."""
        return [rt.value for rt in cls]


class UserStatus(str, Enum):
    """User account status."""

    ACTIVE = "active"
    PENDING = "pending"
    INACTIVE = "inactive"
    DELETED = "deleted"


class OrganizationStatus(str, Enum):
    """Organization lifecycle status."""

    ACTIVE = "active"
    DELETED = "deleted"


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class TodoPriority(str, Enum):
    NORMAL = "normal"
    IMPORTANT = "important"
    URGENT = "urgent"
    CRITICAL = "critical"


class PermissionKind(str, Enum):
    """Kind of access a permission grants on its target.

    ALL implies every other kind.
    """

    ALL = "*"
    CREATE = "create"
    READ = "read"
    WRITE = "write"
    DELETE = "delete"


class SystemRole(str, Enum):
    """Platform-wide roles checked by has_system_role."""

    OWNER = "Owner"
    ADMIN = "Admin"
    SUPPORT = "Support"


class IssueKind(str, Enum):
    EPIC = "epic"
    STORY = "story"
    TASK = "task"
    BUG = "bug"


class IssueStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in progress"
    BLOCKED = "blocked"
    REVIEW = "review"
    DONE = "done"
    CLOSED = "closed"


class IssueResolution(str, Enum):
    NONE = "none"
    FIXED = "fixed"
    DUPLICATE = "duplicate"
    WONT_FIX = "won't fix"
    INVALID = "invalid"
    INCOMPLETE = "incomplete"
    CANNOT_REPRODUCE = "cannot reproduce"


class IssuePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class IssueRelationKind(str, Enum):
    """Typed relation between two issues (stored as a graph edge)."""

    BLOCKED_BY = "blocked by"
    BLOCKS = "blocks"
    DEPENDS_ON = "depends on"
    DUPLICATED_BY = "duplicated by"
    DUPLICATES = "duplicates"
    RELATED_TO = "related to"
