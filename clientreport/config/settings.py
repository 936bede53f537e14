from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "clientreport"
    db_username: str = "clientreport"
    db_password: str = "secret"
    db_connect_timeout_seconds: int = 10
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10

    storage_disk: str = "local"
    files_root: str = "./files"

    max_upload_bytes: int = 10 * 1024 * 1024
    allowed_extensions: list[str] = [".txt", ".csv", ".pdf", ".xls", ".xlsx"]
    allowed_media_types: list[str] = [
        "text/plain",
        "text/csv",
        "application/csv",
        "application/pdf",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ]

    stored_content_max_chars: int = 5000
    summarizer_content_max_chars: int = 10000
    metric_limit: int = 10

    pdf_engine: str = "pdfplumber"

    summarizer_provider: str = "deterministic"
    summarizer_max_tokens: int = 500
    summarizer_temperature: float = 0.3

    summarizer_openai_api_key: str = ""
    summarizer_openai_model_name: str = "gpt-3.5-turbo"
    summarizer_openai_timeout_seconds: int = 30

    summarizer_openai_compatible_api_key: str = ""
    summarizer_openai_compatible_model_name: str = ""
    summarizer_openai_compatible_base_url: str = ""
    summarizer_openai_compatible_timeout_seconds: int = 30

    summarizer_openrouter_api_key: str = ""
    summarizer_openrouter_model_name: str = ""
    summarizer_openrouter_timeout_seconds: int = 30

    summarizer_groq_api_key: str = ""
    summarizer_groq_model_name: str = ""
    summarizer_groq_timeout_seconds: int = 30

    summarizer_together_api_key: str = ""
    summarizer_together_model_name: str = ""
    summarizer_together_timeout_seconds: int = 30

    summarizer_deepseek_api_key: str = ""
    summarizer_deepseek_model_name: str = ""
    summarizer_deepseek_timeout_seconds: int = 30

    summarizer_ollama_api_key: str = "ollama"
    summarizer_ollama_model_name: str = ""
    summarizer_ollama_timeout_seconds: int = 60
