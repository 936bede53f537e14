"""Regex-based detection of percentages, amounts, dates and plain numbers."""

import re
from typing import ClassVar

from clientreport.analysis.models import Metric, MetricKind


class MetricScanner:
    """Scans normalized text for typed metric occurrences.

    Each kind is capped at ``limit`` matches. Plain numbers never overlap a
    percentage, currency or date match. Results are ordered by position.
    """

    CONTEXT_CHARS: ClassVar[int] = 30

    _PERCENTAGE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(?<!\d)(?<!\d[.,])\d+(?:[.,]\d+)*\s*%"
    )
    _CURRENCY_RE: ClassVar[re.Pattern[str]] = re.compile(r"[$€£]\s?\d+(?:[.,]\d+)*")
    _DATE_RE: ClassVar[re.Pattern[str]] = re.compile(r"(?<!\d)\d{4}-\d{2}-\d{2}(?!\d)")
    _NUMBER_RE: ClassVar[re.Pattern[str]] = re.compile(r"(?<![\d.,])\d+(?:[.,]\d+)*(?!\s*%)")

    _ANCHORED_RULES: ClassVar[list[tuple[MetricKind, re.Pattern[str]]]] = [
        (MetricKind.PERCENTAGE, _PERCENTAGE_RE),
        (MetricKind.CURRENCY, _CURRENCY_RE),
        (MetricKind.DATE, _DATE_RE),
    ]

    def __init__(self, limit: int = 10) -> None:
        self._limit = limit

    def scan(self, text: str) -> list[Metric]:
        if not text:
            return []

        found: list[Metric] = []
        taken: list[tuple[int, int]] = []
        for kind, pattern in self._ANCHORED_RULES:
            matches = list(pattern.finditer(text))
            taken.extend(m.span() for m in matches)
            found.extend(self._to_metric(kind, m, text) for m in matches[: self._limit])

        numbers = [
            m for m in self._NUMBER_RE.finditer(text) if not self._overlaps(m.span(), taken)
        ]
        found.extend(self._to_metric(MetricKind.NUMBER, m, text) for m in numbers[: self._limit])

        found.sort(key=lambda metric: metric.position)
        return found

    def _to_metric(self, kind: MetricKind, match: re.Match[str], text: str) -> Metric:
        start, end = match.span()
        context = text[max(0, start - self.CONTEXT_CHARS) : end + self.CONTEXT_CHARS]
        return Metric(kind=kind, value=match.group(0), context=context.strip(), position=start)

    @staticmethod
    def _overlaps(span: tuple[int, int], taken: list[tuple[int, int]]) -> bool:
        start, end = span
        return any(start < t_end and t_start < end for t_start, t_end in taken)
