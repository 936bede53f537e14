from typing import ClassVar

from clientreport.analysis.models import Insight, Metric
from clientreport.logging.logger import Log
from clientreport.summarization.base import BaseSummarizer
from clientreport.summarization.client_base import BaseSummarizationClient
from clientreport.summarization.prompt_loader import load_prompt


class RemoteSummarizer(BaseSummarizer):
    """Summarizes through an AI provider: one summary call plus three fixed questions."""

    INSIGHT_QUESTIONS: ClassVar[dict[str, str]] = {
        "metrics": "What are the main metrics or KPIs mentioned in this document?",
        "trends": "What trends or patterns can be identified in this data?",
        "actions": "What recommendations or actions are suggested based on this information?",
    }

    def __init__(
        self,
        *,
        client: BaseSummarizationClient,
        model: str,
        temperature: float = 0.3,
        max_tokens: int = 500,
        max_input_chars: int = 10000,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._max_input_chars = max_input_chars
        self._system_prompt = load_prompt("system_prompt.txt")
        self._summary_template = load_prompt("summary_prompt.txt")
        self._question_template = load_prompt("question_prompt.txt")

    def summarize(self, text: str) -> str:
        prompt = self._summary_template.format(content=self._excerpt(text))
        return self._call_ai(prompt)

    def answer(self, text: str, question: str) -> str:
        prompt = self._question_template.format(question=question, content=self._excerpt(text))
        return self._call_ai(prompt)

    def generate_insight(self, text: str, metrics: list[Metric]) -> Insight:
        # Scanned metrics are not sent; the provider reads the excerpt itself.
        _ = metrics
        summary = self.summarize(text)
        answers = {
            field: self.answer(text, question)
            for field, question in self.INSIGHT_QUESTIONS.items()
        }
        Log.info(f"Remote insight generated with model {self._model}")
        return Insight(
            summary=summary,
            metrics=answers["metrics"],
            trends=answers["trends"],
            actions=answers["actions"],
            source="remote",
        )

    def _excerpt(self, text: str) -> str:
        return text[: self._max_input_chars]

    def _call_ai(self, prompt: str) -> str:
        Log.debug(f"Summarizer prompt ({len(prompt)} chars)")
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )
