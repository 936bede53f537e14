import httpx
import openai

from clientreport.summarization.client_base import BaseSummarizationClient
from clientreport.summarization.exceptions import RemoteUnavailableError, SummarizerError


class OpenAIClientAdapter(BaseSummarizationClient):
    """Summarization client built on the OpenAI-compatible chat API.

    A single request per call; retries are disabled so a failure falls back
    immediately.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise RemoteUnavailableError(f"AI provider network error: {exc}") from exc
        except openai.APIStatusError as exc:
            raise RemoteUnavailableError(
                f"AI provider returned status {exc.status_code}: {exc.message}"
            ) from exc
        except openai.APIError as exc:
            raise RemoteUnavailableError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise SummarizerError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None or not content.strip():
            raise SummarizerError("AI returned empty response")
        return content.strip()
