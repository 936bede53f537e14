from unittest.mock import patch

import pytest

from clientreport.config.settings import Settings
from clientreport.summarization.deterministic import DeterministicSummarizer
from clientreport.summarization.factory import SummarizerFactory
from clientreport.summarization.remote import RemoteSummarizer

_ADAPTER_PATH = "clientreport.summarization.factory.OpenAIClientAdapter"


class TestSummarizerFactory:
    def test_deterministic_provider(self) -> None:
        summarizer = SummarizerFactory.create(Settings(summarizer_provider="deterministic"))

        assert isinstance(summarizer, DeterministicSummarizer)

    def test_provider_without_key_falls_back(self) -> None:
        settings = Settings(summarizer_provider="openai", summarizer_openai_api_key="")

        assert isinstance(SummarizerFactory.create(settings), DeterministicSummarizer)

    def test_openai_provider(self) -> None:
        settings = Settings(
            summarizer_provider="openai",
            summarizer_openai_api_key="sk-test",
            summarizer_openai_model_name="gpt-test",
            summarizer_openai_timeout_seconds=15,
        )
        with patch(_ADAPTER_PATH) as mock_adapter:
            summarizer = SummarizerFactory.create(settings)

        assert isinstance(summarizer, RemoteSummarizer)
        mock_adapter.assert_called_once_with(api_key="sk-test", timeout_seconds=15, base_url=None)

    def test_groq_uses_default_base_url(self) -> None:
        settings = Settings(summarizer_provider="groq", summarizer_groq_api_key="gk")
        with patch(_ADAPTER_PATH) as mock_adapter:
            SummarizerFactory.create(settings)

        assert mock_adapter.call_args.kwargs["base_url"] == "https://api.groq.com/openai/v1"

    def test_ollama_needs_no_key(self) -> None:
        settings = Settings(summarizer_provider="ollama", summarizer_ollama_api_key="")
        with patch(_ADAPTER_PATH) as mock_adapter:
            summarizer = SummarizerFactory.create(settings)

        assert isinstance(summarizer, RemoteSummarizer)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://localhost:11434/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(
            summarizer_provider="openai_compatible",
            summarizer_openai_compatible_api_key="k",
            summarizer_openai_compatible_base_url="",
        )

        with pytest.raises(ValueError, match="base_url is required"):
            SummarizerFactory.create(settings)

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown summarizer provider"):
            SummarizerFactory.create(Settings(summarizer_provider="mystery"))

    def test_provider_model_and_timeout_are_used(self) -> None:
        settings = Settings(
            summarizer_provider="deepseek",
            summarizer_deepseek_api_key="dk",
            summarizer_deepseek_model_name="deepseek-chat",
            summarizer_deepseek_timeout_seconds=45,
            summarizer_openai_model_name="gpt-ignored",
        )
        with patch(_ADAPTER_PATH) as mock_adapter:
            mock_adapter.return_value.create_chat_completion.return_value = "ok"
            summarizer = SummarizerFactory.create(settings)
            summarizer.summarize("text")

        assert mock_adapter.call_args.kwargs["timeout_seconds"] == 45
        call_kwargs = mock_adapter.return_value.create_chat_completion.call_args.kwargs
        assert call_kwargs["model"] == "deepseek-chat"
