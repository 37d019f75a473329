from typing import ClassVar

from health_insight.config.settings import Settings
from health_insight.llm.client_base import BaseCompletionClient
from health_insight.llm.example_client_adapter import ExampleClientAdapter
from health_insight.llm.fallback import ModelFallbackClient
from health_insight.llm.openai_client_adapter import OpenAIClientAdapter
from health_insight.llm.retry import RetryingCompletionClient


class CompletionClientFactory:
    """Creates the configured completion client and its wrappers."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    # The SDK rejects an empty key; these servers accept any value.
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama", "openai_compatible"})
    PLACEHOLDER_API_KEY: ClassVar[str] = "not-needed"

    @classmethod
    def create(cls, settings: Settings) -> BaseCompletionClient:
        """Create the raw provider client from application settings.

        Raises:
            ValueError: for an unknown provider, or a missing base URL or API key.
        """
        provider = settings.llm_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        return OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=settings.llm_timeout_seconds,
            base_url=base_url,
            default_headers=cls._resolve_headers(provider, settings),
        )

    @classmethod
    def create_retrying(
        cls, settings: Settings, raw: BaseCompletionClient | None = None
    ) -> BaseCompletionClient:
        """Wrap the raw client with transient retry and a per-attempt timeout."""
        return RetryingCompletionClient(
            raw if raw is not None else cls.create(settings),
            max_retries=settings.llm_max_retries,
            base_delay_seconds=settings.llm_retry_base_delay_seconds,
            timeout_seconds=settings.llm_timeout_seconds,
        )

    @classmethod
    def create_vision(
        cls, settings: Settings, raw: BaseCompletionClient | None = None
    ) -> BaseCompletionClient:
        """Wrap the raw client with the one-shot secondary-model fallback."""
        return ModelFallbackClient(
            raw if raw is not None else cls.create(settings),
            fallback_model=settings.vision_fallback_model,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.llm_base_url.strip()
            if not url:
                raise ValueError(
                    "llm_base_url is required for llm_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.llm_base_url.strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown LLM provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_headers(cls, provider: str, settings: Settings) -> dict[str, str] | None:
        if provider != "openrouter":
            return None
        return {
            "HTTP-Referer": settings.llm_http_referer,
            "X-Title": settings.llm_app_title,
        }

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        api_key = settings.llm_api_key.strip()
        if api_key:
            return api_key
        if provider in cls.KEYLESS_PROVIDERS:
            return cls.PLACEHOLDER_API_KEY
        raise ValueError(f"llm_api_key is required for llm_provider={provider}")
