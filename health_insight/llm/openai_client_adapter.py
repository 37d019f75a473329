import httpx
import openai

from health_insight.llm.client_base import BaseCompletionClient
from health_insight.llm.exceptions import LlmError, LlmErrorKind, classify_status
from health_insight.llm.messages import Message


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client built on the OpenAI-compatible chat API (OpenAI, OpenRouter, ...)."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        default_headers: dict[str, str] | None = None,
    ) -> None:
        # Retries are owned by RetryingCompletionClient.
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            default_headers=default_headers,
            max_retries=0,
        )

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[Message],
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=messages,  # type: ignore[arg-type]
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise LlmError(
                f"AI provider timeout: {exc}", kind=LlmErrorKind.TIMEOUT
            ) from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise LlmError(
                f"AI provider network error: {exc}", kind=LlmErrorKind.CONNECTION
            ) from exc
        except openai.APIStatusError as exc:
            raise LlmError(
                f"AI provider API error: {exc}",
                kind=classify_status(exc.status_code),
                status_code=exc.status_code,
            ) from exc
        except openai.APIError as exc:
            raise LlmError(
                f"AI provider API error: {exc}", kind=LlmErrorKind.UNKNOWN
            ) from exc

        if not response.choices:
            raise LlmError("AI returned no choices", kind=LlmErrorKind.EMPTY_RESPONSE)
        content = response.choices[0].message.content
        if not content:
            raise LlmError("AI returned empty response", kind=LlmErrorKind.EMPTY_RESPONSE)
        return content
