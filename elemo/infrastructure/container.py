"""Wiring: Redis client, storage bundles and cached repository bundles.

No business logic here; this module only assembles infrastructure the
way the lifespan and tests need it.
"""

import logging
import ssl
from dataclasses import dataclass

import redis.asyncio as redis
from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff

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
from elemo.core.config import Settings
from elemo.infrastructure.cache.coordinator import CacheCoordinator
from elemo.infrastructure.cache.repositories import (
    CachedAttachmentRepository,
    CachedCommentRepository,
    CachedDocumentRepository,
    CachedIssueRepository,
    CachedLabelRepository,
    CachedNamespaceRepository,
    CachedOrganizationRepository,
    CachedPermissionRepository,
    CachedProjectRepository,
    CachedRoleRepository,
    CachedTodoRepository,
    CachedUserRepository,
)
from elemo.infrastructure.exceptions import InvalidConfigException, NoClientException
from elemo.infrastructure.persistence.memory import (
    MemoryAttachmentRepository,
    MemoryCommentRepository,
    MemoryDocumentRepository,
    MemoryGraph,
    MemoryIssueRepository,
    MemoryLabelRepository,
    MemoryNamespaceRepository,
    MemoryOrganizationRepository,
    MemoryPermissionRepository,
    MemoryProjectRepository,
    MemoryRoleRepository,
    MemoryTodoRepository,
    MemoryUserRepository,
)

logger = logging.getLogger(__name__)


def create_redis_client(settings: Settings | None) -> redis.Redis:
    """Build an asyncio Redis client from settings.

    The client owns a connection pool of ``redis_pool_size`` connections.
    With ``redis_is_secure`` the connection uses TLS 1.2 or newer and
    verifies the server name against ``redis_host``. Redis has no separate
    write timeout, so the socket timeout is the larger of read and write.

    Args:
        settings: Loaded application settings.

    Returns:
        Unconnected Redis client; call ``ping()`` to verify connectivity.

    Raises:
        InvalidConfigException: If settings is None.
    """
    if settings is None:
        raise InvalidConfigException("no redis settings provided")
    tls: dict = {}
    if settings.redis_is_secure:
        tls = {
            "ssl": True,
            "ssl_cert_reqs": "required",
            "ssl_check_hostname": True,
            "ssl_min_version": ssl.TLSVersion.TLSv1_2,
        }
    client = redis.Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        username=settings.redis_username,
        password=(
            settings.redis_password.get_secret_value()
            if settings.redis_password
            else None
        ),
        max_connections=settings.redis_pool_size,
        socket_connect_timeout=settings.redis_dial_timeout,
        socket_timeout=max(settings.redis_read_timeout, settings.redis_write_timeout),
        socket_keepalive=True,
        retry=Retry(ExponentialBackoff(), settings.redis_max_retries),
        **tls,
    )
    logger.info(
        "Redis client configured: %s:%s db=%s tls=%s",
        settings.redis_host,
        settings.redis_port,
        settings.redis_db,
        settings.redis_is_secure,
    )
    return client


@dataclass(frozen=True)
class StorageRepositories:
    """One storage repository per family."""

    attachments: IAttachmentRepository
    comments: ICommentRepository
    documents: IDocumentRepository
    issues: IIssueRepository
    labels: ILabelRepository
    namespaces: INamespaceRepository
    organizations: IOrganizationRepository
    permissions: IPermissionRepository
    projects: IProjectRepository
    roles: IRoleRepository
    todos: ITodoRepository
    users: IUserRepository


@dataclass(frozen=True)
class CachedRepositories:
    """One cached decorator per family, all sharing a coordinator."""

    attachments: CachedAttachmentRepository
    comments: CachedCommentRepository
    documents: CachedDocumentRepository
    issues: CachedIssueRepository
    labels: CachedLabelRepository
    namespaces: CachedNamespaceRepository
    organizations: CachedOrganizationRepository
    permissions: CachedPermissionRepository
    projects: CachedProjectRepository
    roles: CachedRoleRepository
    todos: CachedTodoRepository
    users: CachedUserRepository


def build_memory_storage(graph: MemoryGraph | None = None) -> StorageRepositories:
    """Return memory storage repositories over one shared graph."""
    graph = graph if graph is not None else MemoryGraph()
    return StorageRepositories(
        attachments=MemoryAttachmentRepository(graph),
        comments=MemoryCommentRepository(graph),
        documents=MemoryDocumentRepository(graph),
        issues=MemoryIssueRepository(graph),
        labels=MemoryLabelRepository(graph),
        namespaces=MemoryNamespaceRepository(graph),
        organizations=MemoryOrganizationRepository(graph),
        permissions=MemoryPermissionRepository(graph),
        projects=MemoryProjectRepository(graph),
        roles=MemoryRoleRepository(graph),
        todos=MemoryTodoRepository(graph),
        users=MemoryUserRepository(graph),
    )


def build_cached_repositories(
    storage: StorageRepositories, coordinator: CacheCoordinator | None
) -> CachedRepositories:
    """Wrap every storage repository in its cached decorator.

    Args:
        storage: Storage repositories to wrap.
        coordinator: Cache coordinator shared by all decorators.

    Returns:
        Bundle of cached decorators.

    Raises:
        NoClientException: If coordinator is None.
    """
    if coordinator is None:
        raise NoClientException()
    return CachedRepositories(
        attachments=CachedAttachmentRepository(storage.attachments, coordinator),
        comments=CachedCommentRepository(storage.comments, coordinator),
        documents=CachedDocumentRepository(storage.documents, coordinator),
        issues=CachedIssueRepository(storage.issues, coordinator),
        labels=CachedLabelRepository(storage.labels, coordinator),
        namespaces=CachedNamespaceRepository(storage.namespaces, coordinator),
        organizations=CachedOrganizationRepository(storage.organizations, coordinator),
        permissions=CachedPermissionRepository(storage.permissions, coordinator),
        projects=CachedProjectRepository(storage.projects, coordinator),
        roles=CachedRoleRepository(storage.roles, coordinator),
        todos=CachedTodoRepository(storage.todos, coordinator),
        users=CachedUserRepository(storage.users, coordinator),
    )
