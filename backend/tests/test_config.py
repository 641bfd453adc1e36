"""
Bookshelf API: Settings Tests
==============================
"""

import pytest
from pydantic import ValidationError

from bookshelf.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("BOOKSHELF_PORT", "BOOKSHELF_LOG_LEVEL", "BOOKSHELF_MISSING_BOOK_STATUS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.port == 3000
        assert settings.idle_timeout == 10
        assert settings.max_header_bytes == 1 << 20
        assert settings.missing_book_status == 400
        assert settings.log_level == "INFO"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("BOOKSHELF_PORT", "8080")
        monkeypatch.setenv("BOOKSHELF_MISSING_BOOK_STATUS", "404")

        settings = Settings(_env_file=None)

        assert settings.port == 8080
        assert settings.missing_book_status == 404

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    @pytest.mark.parametrize("status", [200, 409, 500])
    def test_missing_book_status_limited_to_400_or_404(self, status):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, missing_book_status=status)
