"""Span names, status and attributes produced by the tracing helpers."""

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from elemo.domain.entities import Label
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.repositories import CachedLabelRepository
from elemo.shared.telemetry.tracing import TracedOperation, get_trace_id, traced

_EXPORTER = InMemorySpanExporter()


@pytest.fixture(scope="module", autouse=True)
def _tracer_provider():
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(_EXPORTER))
    trace.set_tracer_provider(provider)
    yield


@pytest.fixture(autouse=True)
def _clear_spans():
    _EXPORTER.clear()
    yield


def _span_names() -> list[str]:
    return [span.name for span in _EXPORTER.get_finished_spans()]


async def test_decorator_and_coordinator_spans(coordinator) -> None:
    label = Label(id=ID("L1", ResourceType.LABEL), name="bug")

    class Storage:
        async def get(self, id: ID) -> Label:
            return label

    repo = CachedLabelRepository(Storage(), coordinator)
    await repo.get(label.id)

    names = _span_names()
    assert "repository.redis.CachedLabelRepository/Get" in names
    assert "repository.redis.CacheCoordinator/Get" in names
    assert "repository.redis.CacheCoordinator/Set" in names


def test_traced_records_error_status() -> None:
    @traced("test/Fail")
    def fail() -> None:
        raise ValueError("boom")

    with pytest.raises(ValueError):
        fail()
    (span,) = _EXPORTER.get_finished_spans()
    assert span.status.status_code is StatusCode.ERROR


def test_traced_records_only_allowlisted_kwargs() -> None:
    @traced("test/Args")
    def op(**kwargs) -> None:
        return None

    op(id="D1", password="secret")
    (span,) = _EXPORTER.get_finished_spans()
    assert span.attributes["arg.id"] == "D1"
    assert "arg.password" not in span.attributes


async def test_traced_operation_async() -> None:
    async with TracedOperation("test/Block", {"cache.key": "Label:L1"}):
        pass
    (span,) = _EXPORTER.get_finished_spans()
    assert span.attributes["cache.key"] == "Label:L1"
    assert span.status.status_code is StatusCode.OK


async def test_read_through_tags_cache_hit(coordinator) -> None:
    label = Label(id=ID("L1", ResourceType.LABEL), name="bug")

    class Storage:
        async def get(self, id: ID) -> Label:
            return label

    repo = CachedLabelRepository(Storage(), coordinator)
    await repo.get(label.id)
    await repo.get(label.id)

    hits = [
        span.attributes["cache.hit"]
        for span in _EXPORTER.get_finished_spans()
        if span.name == "repository.redis.CachedLabelRepository/Get"
    ]
    assert hits == [False, True]


def test_trace_id_inside_and_outside_span() -> None:
    assert get_trace_id() is None
    with TracedOperation("test/TraceId"):
        trace_id = get_trace_id()
    assert trace_id is not None and len(trace_id) == 32
