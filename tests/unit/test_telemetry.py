"""TelemetryConfig construction and exporter selection."""

from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from elemo.core.config import Settings
from elemo.shared.telemetry.telemetry import (
    TelemetryConfig,
    _build_exporter,
    get_telemetry,
    set_telemetry,
)


def test_from_settings() -> None:
    settings = Settings(
        telemetry_enabled=True,
        telemetry_exporter="otlp",
        telemetry_otlp_endpoint="http://collector:4317",
        telemetry_sample_rate=0.5,
    )
    config = TelemetryConfig.from_settings(settings)
    assert config.service_name == "elemo"
    assert config.enabled is True
    assert config.otlp_endpoint == "http://collector:4317"
    assert config.sample_rate == 0.5


def test_disabled_setup_is_noop() -> None:
    config = TelemetryConfig.from_settings(Settings(telemetry_enabled=False))
    assert config.setup_telemetry() is None
    config.instrument()
    config.shutdown()
    assert config.tracer_provider is None


def test_exporter_selection() -> None:
    assert _build_exporter("none", None) is None
    assert isinstance(_build_exporter("console", None), ConsoleSpanExporter)
    assert isinstance(
        _build_exporter("otlp", "http://collector:4317"), OTLPSpanExporter
    )
    assert isinstance(_build_exporter("zipkin", None), ConsoleSpanExporter)


def test_global_instance() -> None:
    config = TelemetryConfig("elemo", "1.0.0", enabled=False)
    set_telemetry(config)
    try:
        assert get_telemetry() is config
    finally:
        set_telemetry(None)
    assert get_telemetry() is None
