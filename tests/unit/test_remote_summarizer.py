from unittest.mock import MagicMock

import pytest

from clientreport.summarization.client_base import BaseSummarizationClient
from clientreport.summarization.exceptions import RemoteUnavailableError
from clientreport.summarization.remote import RemoteSummarizer


def _make_summarizer(**kwargs: object) -> tuple[RemoteSummarizer, MagicMock]:
    client = MagicMock(spec=BaseSummarizationClient)
    client.create_chat_completion.return_value = "reply"
    summarizer = RemoteSummarizer(client=client, model="test-model", **kwargs)  # type: ignore[arg-type]
    return summarizer, client


class TestSummarize:
    def test_sends_content_in_summary_prompt(self) -> None:
        summarizer, client = _make_summarizer(temperature=0.2, max_tokens=123)

        assert summarizer.summarize("Quarterly revenue") == "reply"

        kwargs = client.create_chat_completion.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["temperature"] == 0.2
        assert kwargs["max_tokens"] == 123
        assert kwargs["system_prompt"].startswith("You are a professional report summarizer")
        assert "Quarterly revenue" in kwargs["user_prompt"]

    def test_content_is_capped(self) -> None:
        summarizer, client = _make_summarizer(max_input_chars=10)

        summarizer.summarize("0123456789ABCDEF")

        user_prompt = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "0123456789" in user_prompt
        assert "ABCDEF" not in user_prompt


class TestAnswer:
    def test_includes_question_and_content(self) -> None:
        summarizer, client = _make_summarizer()

        summarizer.answer("content body", "Who paid?")

        user_prompt = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "Who paid?" in user_prompt
        assert "content body" in user_prompt


class TestGenerateInsight:
    def test_one_summary_and_three_questions(self) -> None:
        summarizer, client = _make_summarizer()
        client.create_chat_completion.side_effect = ["sum", "kpis", "trends", "actions"]

        insight = summarizer.generate_insight("text", [])

        assert client.create_chat_completion.call_count == 4
        assert insight.summary == "sum"
        assert insight.metrics == "kpis"
        assert insight.trends == "trends"
        assert insight.actions == "actions"
        assert insight.source == "remote"

    def test_propagates_remote_failure(self) -> None:
        summarizer, client = _make_summarizer()
        client.create_chat_completion.side_effect = RemoteUnavailableError("down")

        with pytest.raises(RemoteUnavailableError):
            summarizer.generate_insight("text", [])
