"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time

from tests.conftest import reference_request
from tileplan.services.plan import PlanService
from tileplan.services.result import ServiceResult
from tileplan.services.telemetry import (
    Span,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.005)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "duration_ms" in d
        assert "children" not in d
        assert "annotations" not in d

    def test_to_dict_nested(self) -> None:
        root = Span(name="root")
        child = Span(name="child")
        child.annotate("placements", 54)
        root.children.append(child)
        d = root.to_dict()
        assert d["children"][0]["name"] == "child"
        assert d["children"][0]["annotations"] == {"placements": 54}


class TestTraceSpan:
    def test_yields_none_when_disabled(self) -> None:
        with trace_span("step") as span:
            assert span is None

    def test_yields_none_without_active_root(self) -> None:
        enable_telemetry()
        with trace_span("step") as span:
            assert span is None

    def test_current_span_none_when_disabled(self) -> None:
        assert get_current_span() is None


class TestTraced:
    def test_disabled_leaves_meta_alone(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="x")

        assert op().meta is None

    def test_enabled_attaches_span_tree(self) -> None:
        @traced
        def op() -> ServiceResult:
            with trace_span("inner"):
                assert get_current_span() is not None
            return ServiceResult(ok=True, op="x", meta={"keep": 1})

        enable_telemetry()
        result = op()
        assert result.meta is not None
        assert result.meta["keep"] == 1
        tree = result.meta["telemetry"]
        assert tree["children"][0]["name"] == "inner"

    def test_non_result_return_passes_through(self) -> None:
        @traced
        def op() -> int:
            return 7

        enable_telemetry()
        assert op() == 7

    def test_plan_service_spans(self, service: PlanService) -> None:
        enable_telemetry()
        result = service.plan(reference_request())
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "PlanService.plan"
        assert [c["name"] for c in tree["children"]] == ["resolve", "tile", "summarize"]
        assert tree["children"][1]["annotations"] == {"placements": 54}

    def test_layout_projected_spans(self, service: PlanService) -> None:
        enable_telemetry()
        result = service.layout(reference_request(), projected=True)
        assert result.meta is not None
        names = [c["name"] for c in result.meta["telemetry"]["children"]]
        assert names == ["resolve", "tile", "project"]

    def test_failed_resolve_is_still_timed(self, service: PlanService) -> None:
        enable_telemetry()
        result = service.plan(reference_request(room_unit="yd"))
        assert not result.ok
        assert result.meta is not None
        assert [c["name"] for c in result.meta["telemetry"]["children"]] == ["resolve"]
