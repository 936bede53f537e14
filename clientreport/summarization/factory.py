from typing import ClassVar

from clientreport.config.settings import Settings
from clientreport.summarization.base import BaseSummarizer
from clientreport.summarization.deterministic import DeterministicSummarizer
from clientreport.summarization.openai_client_adapter import OpenAIClientAdapter
from clientreport.summarization.remote import RemoteSummarizer


class SummarizerFactory:
    """Creates the summarizer selected by ``summarizer_provider``.

    ``deterministic`` needs no network. Every other provider talks to an
    OpenAI-compatible API; without an API key (ollama excepted) the
    deterministic summarizer is used.
    """

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create(cls, settings: Settings) -> BaseSummarizer:
        provider = settings.summarizer_provider.lower()
        if provider == "deterministic":
            return DeterministicSummarizer()
        base_url = cls._resolve_base_url(provider, settings)
        api_key = cls._resolve_api_key(provider, settings)
        if not api_key and provider not in cls.KEYLESS_PROVIDERS:
            return DeterministicSummarizer()
        client = OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=base_url,
        )
        return RemoteSummarizer(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.summarizer_temperature,
            max_tokens=settings.summarizer_max_tokens,
            max_input_chars=settings.summarizer_content_max_chars,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.summarizer_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "summarizer_openai_compatible_base_url is required for "
                    "summarizer_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "deterministic",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown summarizer provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.summarizer_openai_api_key,
            "openai_compatible": settings.summarizer_openai_compatible_api_key,
            "openrouter": settings.summarizer_openrouter_api_key,
            "groq": settings.summarizer_groq_api_key,
            "together": settings.summarizer_together_api_key,
            "deepseek": settings.summarizer_deepseek_api_key,
            "ollama": settings.summarizer_ollama_api_key,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        model_map = {
            "openai": settings.summarizer_openai_model_name,
            "openai_compatible": settings.summarizer_openai_compatible_model_name,
            "openrouter": settings.summarizer_openrouter_model_name,
            "groq": settings.summarizer_groq_model_name,
            "together": settings.summarizer_together_model_name,
            "deepseek": settings.summarizer_deepseek_model_name,
            "ollama": settings.summarizer_ollama_model_name,
        }
        return model_map.get(provider, "") or ""

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        timeout_map = {
            "openai": settings.summarizer_openai_timeout_seconds,
            "openai_compatible": settings.summarizer_openai_compatible_timeout_seconds,
            "openrouter": settings.summarizer_openrouter_timeout_seconds,
            "groq": settings.summarizer_groq_timeout_seconds,
            "together": settings.summarizer_together_timeout_seconds,
            "deepseek": settings.summarizer_deepseek_timeout_seconds,
            "ollama": settings.summarizer_ollama_timeout_seconds,
        }
        return timeout_map.get(provider, 30) or 30
