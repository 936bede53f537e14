from clientreport.analysis.models import Insight, Metric
from clientreport.logging.logger import Log
from clientreport.summarization.base import BaseSummarizer
from clientreport.summarization.deterministic import DeterministicSummarizer
from clientreport.summarization.exceptions import SummarizerError


class InsightAggregator:
    """Combines text and scanned metrics into an Insight.

    The configured summarizer gets exactly one attempt. Any SummarizerError
    (including RemoteUnavailableError) is recovered by the deterministic
    summarizer and never reaches the caller.
    """

    def __init__(
        self,
        summarizer: BaseSummarizer,
        fallback: DeterministicSummarizer | None = None,
    ) -> None:
        self._summarizer = summarizer
        self._fallback = fallback or DeterministicSummarizer()

    def aggregate(self, text: str, metrics: list[Metric]) -> Insight:
        try:
            return self._summarizer.generate_insight(text, metrics)
        except SummarizerError as exc:
            Log.warning(f"Summarizer unavailable, using deterministic insight: {exc}")
            return self._fallback.generate_insight(text, metrics)

    def ask(self, text: str, question: str) -> str:
        """Answer a free-form question about *text*, falling back the same way."""
        try:
            return self._summarizer.answer(text, question)
        except SummarizerError as exc:
            Log.warning(f"Summarizer unavailable, answering locally: {exc}")
            return self._fallback.answer(text, question)
