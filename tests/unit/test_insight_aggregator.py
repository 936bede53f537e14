from unittest.mock import MagicMock

import pytest

from clientreport.analysis.aggregator import InsightAggregator
from clientreport.analysis.metrics import MetricScanner
from clientreport.analysis.models import Insight, Metric, MetricKind
from clientreport.summarization.base import BaseSummarizer
from clientreport.summarization.deterministic import DeterministicSummarizer
from clientreport.summarization.exceptions import RemoteUnavailableError, SummarizerError


class TestAggregate:
    def test_uses_summarizer_result(self) -> None:
        summarizer = MagicMock(spec=BaseSummarizer)
        expected = Insight(summary="remote", source="remote")
        summarizer.generate_insight.return_value = expected

        assert InsightAggregator(summarizer).aggregate("text", []) is expected

    def test_remote_failure_falls_back_to_deterministic(self) -> None:
        summarizer = MagicMock(spec=BaseSummarizer)
        summarizer.generate_insight.side_effect = RemoteUnavailableError("timeout")
        metrics = [Metric(MetricKind.NUMBER, "4", "4 units", 0)]

        insight = InsightAggregator(summarizer).aggregate("4 units", metrics)

        assert summarizer.generate_insight.call_count == 1
        assert insight.source == "deterministic"
        assert insight.metrics == metrics

    def test_uses_injected_fallback(self) -> None:
        summarizer = MagicMock(spec=BaseSummarizer)
        summarizer.generate_insight.side_effect = SummarizerError("empty")
        fallback = MagicMock()
        fallback.generate_insight.return_value = Insight(summary="fallback")

        insight = InsightAggregator(summarizer, fallback).aggregate("t", [])

        assert insight.summary == "fallback"


class TestAsk:
    def test_falls_back_to_local_answer(self) -> None:
        summarizer = MagicMock(spec=BaseSummarizer)
        summarizer.answer.side_effect = RemoteUnavailableError("down")

        answer = InsightAggregator(summarizer).ask("Revenue rose.", "What about revenue?")

        assert answer == "Revenue rose."


class TestDeterministicPath:
    @pytest.mark.parametrize("text", ["", "   \n", "no digits at all", "a, b\n1, 2\n" * 500])
    def test_always_returns_complete_insight(self, text: str) -> None:
        aggregator = InsightAggregator(DeterministicSummarizer())

        insight = aggregator.aggregate(text, MetricScanner().scan(text))

        assert insight.summary
        assert insight.metrics
        assert insight.trends
        assert insight.actions
