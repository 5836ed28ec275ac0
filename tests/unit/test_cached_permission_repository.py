"""The permission decorator forwards every call and never touches the cache."""

from unittest.mock import AsyncMock

from elemo.domain.entities import Permission
from elemo.domain.enums import PermissionKind, ResourceType, SystemRole
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.repositories import CachedPermissionRepository

S1 = ID("S1", ResourceType.USER)
D1 = ID("D1", ResourceType.DOCUMENT)
P1 = ID("P1", ResourceType.PERMISSION)


async def test_every_operation_passes_through(coordinator, backend) -> None:
    permission = Permission(id=P1, kind=PermissionKind.READ, subject=S1, target=D1)
    storage = AsyncMock()
    storage.get = AsyncMock(return_value=permission)
    storage.get_by_subject = AsyncMock(return_value=[permission])
    storage.get_by_target = AsyncMock(return_value=[permission])
    storage.get_by_subject_and_target = AsyncMock(return_value=[permission])
    storage.update = AsyncMock(return_value=permission)
    storage.has_permission = AsyncMock(return_value=True)
    storage.has_any_relation = AsyncMock(return_value=False)
    storage.has_system_role = AsyncMock(return_value=True)
    repo = CachedPermissionRepository(storage, coordinator)

    await repo.create(permission)
    assert await repo.get(P1) == permission
    assert await repo.get_by_subject(S1) == [permission]
    assert await repo.get_by_target(D1) == [permission]
    assert await repo.get_by_subject_and_target(S1, D1) == [permission]
    assert await repo.update(P1, PermissionKind.WRITE) == permission
    assert await repo.has_permission(S1, D1, PermissionKind.READ, PermissionKind.WRITE)
    assert not await repo.has_any_relation(S1, D1)
    assert await repo.has_system_role(S1, SystemRole.OWNER)
    await repo.delete(P1)

    storage.has_permission.assert_awaited_once_with(
        S1, D1, PermissionKind.READ, PermissionKind.WRITE
    )
    storage.has_system_role.assert_awaited_once_with(S1, SystemRole.OWNER)
    storage.delete.assert_awaited_once_with(P1)
    assert backend.calls == []


async def test_repeated_reads_always_hit_storage(coordinator, backend) -> None:
    storage = AsyncMock()
    storage.get_by_subject = AsyncMock(return_value=[])
    repo = CachedPermissionRepository(storage, coordinator)

    await repo.get_by_subject(S1)
    await repo.get_by_subject(S1)
    assert storage.get_by_subject.await_count == 2
    assert backend.calls == []
