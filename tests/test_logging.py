"""Tests for loguru records emitted by the scheduler."""

from loguru import logger

from debounced.config import DebounceConfig
from debounced.core import Scheduler


def messages(records):
    return [r.record["message"] for r in records]


class TestLogging:
    def test_disabled_by_default(self, target, loop):
        records = []
        sink_id = logger.add(records.append, level="DEBUG")
        try:
            s = Scheduler(target, DebounceConfig(leading=True), loop=loop)
            s("a")
        finally:
            logger.remove(sink_id)
        assert records == []

    def test_leading_and_trailing_edges(self, log_records, target, loop):
        s = Scheduler(target, DebounceConfig(debounce_time=100, leading=True), loop=loop)
        s("a")
        loop.advance(0.2)
        logged = messages(log_records)
        assert any(m.endswith("leading edge") for m in logged)
        assert any(m.endswith("trailing edge") for m in logged)

    def test_override_logged(self, log_records, target, loop):
        s = Scheduler(target, DebounceConfig(debounce_time=100, max_skipped_calls=1), loop=loop)
        s("a")
        s("b")
        assert any("1 calls skipped, invoking now" in m for m in messages(log_records))

    def test_cache_hit_logged(self, log_records, target, loop):
        s = Scheduler(target, DebounceConfig(debounce_time=100, leading=True, memoization=True), loop=loop)
        s("a")
        loop.advance(0.2)
        assert any("memoized result" in m for m in messages(log_records))

    def test_warns_when_both_edges_disabled(self, log_records, target):
        Scheduler(target, DebounceConfig(leading=False, trailing=False))
        warnings = [r.record for r in log_records if r.record["level"].name == "WARNING"]
        assert len(warnings) == 1
        assert "leading and trailing disabled" in warnings[0]["message"]

    def test_warns_that_batched_calls_accumulate(self, log_records, target):
        Scheduler(target, DebounceConfig(leading=False, trailing=False, batching=True))
        warnings = [r.record["message"] for r in log_records if r.record["level"].name == "WARNING"]
        assert len(warnings) == 1
        assert "batched calls accumulate" in warnings[0]
