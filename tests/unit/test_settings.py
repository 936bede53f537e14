import pytest

from clientreport.config.settings import Settings
from clientreport.database.connection import build_conninfo


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        assert Settings().app_env == "dev"

    def test_default_db_port(self) -> None:
        assert Settings().db_port == 5432

    def test_default_upload_limit(self) -> None:
        assert Settings().max_upload_bytes == 10 * 1024 * 1024

    def test_default_allowed_extensions(self) -> None:
        assert Settings().allowed_extensions == [".txt", ".csv", ".pdf", ".xls", ".xlsx"]

    def test_default_caps(self) -> None:
        s = Settings()
        assert s.stored_content_max_chars == 5000
        assert s.summarizer_content_max_chars == 10000
        assert s.metric_limit == 10

    def test_default_summarizer(self) -> None:
        s = Settings()
        assert s.summarizer_provider == "deterministic"
        assert s.summarizer_max_tokens == 500
        assert s.summarizer_temperature == 0.3
        assert s.summarizer_openai_model_name == "gpt-3.5-turbo"

    def test_default_pdf_engine(self) -> None:
        assert Settings().pdf_engine == "pdfplumber"


class TestSettingsFromEnv:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUMMARIZER_PROVIDER", "groq")
        monkeypatch.setenv("METRIC_LIMIT", "3")

        s = Settings()

        assert s.summarizer_provider == "groq"
        assert s.metric_limit == 3


def test_build_conninfo() -> None:
    settings = Settings(db_host="db", db_port=6543, db_database="d", db_username="u", db_password="p")

    assert build_conninfo(settings) == (
        "host=db port=6543 dbname=d user=u password=p connect_timeout=10"
    )
