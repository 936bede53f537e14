from abc import ABC, abstractmethod

from clientreport.analysis.models import Insight, Metric


class BaseSummarizer(ABC):
    """Capability that turns normalized text into summaries, answers and insights."""

    @abstractmethod
    def summarize(self, text: str) -> str:
        """Return a summary of *text*.

        Raises:
            SummarizerError: on any failure.
        """

    @abstractmethod
    def answer(self, text: str, question: str) -> str:
        """Answer *question* about *text*.

        Raises:
            SummarizerError: on any failure.
        """

    @abstractmethod
    def generate_insight(self, text: str, metrics: list[Metric]) -> Insight:
        """Build the full Insight for one file.

        Args:
            text: Normalized file text.
            metrics: Locally scanned metrics, in text order.

        Raises:
            SummarizerError: on any failure.
        """
