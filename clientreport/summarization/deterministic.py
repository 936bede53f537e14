"""Local summarizer used when no AI provider is configured or reachable."""

import re
from typing import ClassVar

from clientreport.analysis.models import Insight, Metric, MetricKind
from clientreport.summarization.base import BaseSummarizer

_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+|\n+")
_WORD_RE = re.compile(r"[a-z0-9]{4,}")


class DeterministicSummarizer(BaseSummarizer):
    """Builds summaries and insights from the text alone. Never raises."""

    PREVIEW_CHARS: ClassVar[int] = 500

    EXAMPLE_METRICS: ClassVar[tuple[Metric, ...]] = (
        Metric(MetricKind.PERCENTAGE, "15%", "Example: revenue grew 15% quarter over quarter"),
        Metric(MetricKind.CURRENCY, "$250,000", "Example: total revenue reached $250,000"),
        Metric(MetricKind.NUMBER, "42", "Example: 42 new clients were onboarded"),
    )
    EXAMPLE_TRENDS: ClassVar[tuple[str, ...]] = (
        "Key figures point to steady period-over-period growth",
        "Activity is concentrated in a small number of dominant categories",
        "Values cluster around recent reporting dates",
    )
    EXAMPLE_ACTIONS: ClassVar[tuple[str, ...]] = (
        "Review the highlighted figures with the client and confirm their accuracy",
        "Track the main metrics over the next reporting period",
        "Investigate outliers before sharing the report externally",
    )

    def summarize(self, text: str) -> str:
        stripped = text.strip()
        if not stripped:
            return "No readable content was found in this file."
        words = len(stripped.split())
        lines = len(stripped.splitlines())
        preview = stripped[: self.PREVIEW_CHARS]
        if len(stripped) > self.PREVIEW_CHARS:
            preview += "..."
        return (
            f"Automated summary of {words} words across {lines} lines.\n\n"
            f"Content preview:\n{preview}"
        )

    def answer(self, text: str, question: str) -> str:
        """Return the sentences sharing the most keywords with *question*."""
        keywords = set(_WORD_RE.findall(question.lower()))
        scored: list[tuple[int, int, str]] = []
        for index, sentence in enumerate(_SENTENCE_SPLIT_RE.split(text)):
            sentence = sentence.strip()
            if not sentence:
                continue
            hits = len(keywords & set(_WORD_RE.findall(sentence.lower())))
            if hits:
                scored.append((-hits, index, sentence))
        if not scored:
            return (
                f'No AI model is configured, and no passage in the content matches "{question}".'
            )
        best = sorted(scored)[:3]
        return " ".join(sentence for _, _, sentence in sorted(best, key=lambda item: item[1]))

    def generate_insight(self, text: str, metrics: list[Metric]) -> Insight:
        found = list(metrics) if metrics else list(self.EXAMPLE_METRICS)
        summary = self.summarize(text)
        if metrics:
            summary += f"\n\nDetected {len(metrics)} metric(s) in the content."
        else:
            summary += "\n\nNo metrics were detected; example metrics are shown instead."
        return Insight(
            summary=summary,
            metrics=found,
            trends=list(self.EXAMPLE_TRENDS),
            actions=list(self.EXAMPLE_ACTIONS),
            source="deterministic",
        )
