"""Unit tests for render tracing."""

from unittest.mock import patch

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from smartquery import QueryBuilder
from smartquery.settings import get_settings
from smartquery.utils.decorators import traced


@pytest.fixture
def exporter():
    """Route spans created through smartquery's tracer to an in-memory exporter."""
    span_exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))

    with patch("smartquery.utils.decorators.get_tracer", side_effect=provider.get_tracer):
        yield span_exporter


class TestRenderTracing:
    """Test spans created around render."""

    def test_render_creates_span(self, exporter, builder):
        """Test render opens a span with builder attributes."""
        builder.where("id", "=", 1).render()

        (span,) = exporter.get_finished_spans()
        assert span.name == "smartquery.render"
        assert span.attributes["smartquery.table"] == "table"
        assert span.attributes["smartquery.columns"] == 2
        assert span.attributes["smartquery.where_entries"] == 1

    def test_nested_render_creates_child_span(self, exporter, builder):
        """Test a nested render is a child span of the outer render."""
        builder.where(QueryBuilder().where("a", "=", 1)).render()

        spans = exporter.get_finished_spans()
        assert len(spans) == 2
        child, parent = spans
        assert child.parent.span_id == parent.context.span_id

    def test_tracing_can_be_disabled(self, exporter, builder, monkeypatch):
        """Test SMARTQUERY_TRACE_RENDER=false skips the span."""
        monkeypatch.setenv("SMARTQUERY_TRACE_RENDER", "false")
        get_settings(force_reload=True)

        builder.render()

        assert exporter.get_finished_spans() == ()


class TestTracedDecorator:
    """Test the traced decorator on its own."""

    def test_exception_is_recorded_and_reraised(self, exporter):
        """Test an exception marks the span as error and propagates."""
        @traced("failing")
        def fail():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            fail()

        (span,) = exporter.get_finished_spans()
        assert span.status.status_code is StatusCode.ERROR
        assert span.events[0].name == "exception"
