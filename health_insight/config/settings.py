from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    llm_provider: str = "openrouter"
    llm_api_key: str = ""
    llm_base_url: str = ""
    llm_timeout_seconds: int = 60
    llm_temperature: float = 0.1
    llm_max_retries: int = 2
    llm_retry_base_delay_seconds: float = 1.0
    llm_http_referer: str = "http://localhost:5000"
    llm_app_title: str = "Health Insight Agent"

    analysis_model: str = "arcee-ai/trinity-large-preview:free"
    chat_model: str = "arcee-ai/trinity-large-preview:free"
    vision_model: str = "allenai/molmo-2-8b:free"
    vision_fallback_model: str = "google/gemma-3-27b-it:free"

    pdf_engine: str = "pdfplumber"
    image_engine: str = "tesseract"
    tesseract_lang: str = "eng"

    sanitizer_min_length: int = 50
    sanitizer_max_length: int = 5000
