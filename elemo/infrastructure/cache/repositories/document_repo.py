"""Cached document repository."""

from __future__ import annotations

from pydantic import TypeAdapter

from elemo.application.interfaces.repositories import IDocumentRepository
from elemo.domain.entities import Document, DocumentPatch
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.invalidation import Key, Refresh
from elemo.infrastructure.cache.repositories.base import SPAN_PREFIX, CachedRepository
from elemo.shared.telemetry.tracing import traced

_SPAN = f"{SPAN_PREFIX}.CachedDocumentRepository"

_DOCUMENT = TypeAdapter(Document)
_DOCUMENTS = TypeAdapter(list[Document])


class CachedDocumentRepository(CachedRepository[IDocumentRepository]):
    """Document repository with read-through caching.

    Documents are listed by owner (GetAllBelongsTo) and by creator
    (GetByCreator). Namespaces, projects and users embed their documents,
    so creating or deleting a document drops those families entirely.
    A rename also drops namespaces, which embed the document name.
    """

    resource_type = ResourceType.DOCUMENT

    @traced(f"{_SPAN}/Create")
    async def create(self, belongs_to: ID, document: Document) -> None:
        await self.repo.create(belongs_to, document)
        await self._invalidate(
            self._query_pattern("GetAllBelongsTo", belongs_to),
            self._query_pattern("GetByCreator", document.created_by),
            self._family(ResourceType.NAMESPACE),
            self._family(ResourceType.PROJECT),
            self._family(ResourceType.USER),
        )

    @traced(f"{_SPAN}/Get")
    async def get(self, id: ID) -> Document:
        return await self._read_through(
            self._point(id), _DOCUMENT, lambda: self.repo.get(id)
        )

    @traced(f"{_SPAN}/GetByCreator")
    async def get_by_creator(
        self, created_by: ID, offset: int, limit: int
    ) -> list[Document]:
        return await self._read_through(
            self._query("GetByCreator", created_by, offset, limit),
            _DOCUMENTS,
            lambda: self.repo.get_by_creator(created_by, offset, limit),
        )

    @traced(f"{_SPAN}/GetAllBelongsTo")
    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Document]:
        return await self._read_through(
            self._query("GetAllBelongsTo", belongs_to, offset, limit),
            _DOCUMENTS,
            lambda: self.repo.get_all_belongs_to(belongs_to, offset, limit),
        )

    @traced(f"{_SPAN}/Update")
    async def update(self, id: ID, patch: DocumentPatch) -> Document:
        document = await self.repo.update(id, patch)
        await self._invalidate(
            Refresh(self._point(id), document),
            self._query_pattern("GetAllBelongsTo"),
            self._query_pattern("GetByCreator", document.created_by),
            self._family(ResourceType.NAMESPACE),
        )
        return document

    @traced(f"{_SPAN}/Delete")
    async def delete(self, id: ID) -> None:
        await self.repo.delete(id)
        await self._invalidate(
            Key(self._point(id)),
            self._query_pattern("GetAllBelongsTo"),
            self._query_pattern("GetByCreator"),
            self._family(ResourceType.NAMESPACE),
            self._family(ResourceType.PROJECT),
            self._family(ResourceType.USER),
        )
