"""Tests for roost.config: AppConfig defaults and immutability."""

import dataclasses

import pytest

from roost.config import AppConfig


class TestAppConfig:
    def test_defaults(self) -> None:
        config = AppConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8000
        assert config.debug is False
        assert config.openapi_path == "/openapi.json"
        assert config.docs_path == "/docs"
        assert config.cache_document is True

    def test_override(self) -> None:
        config = AppConfig(port=3000, docs_path=None)
        assert config.port == 3000
        assert config.docs_path is None

    def test_frozen(self) -> None:
        config = AppConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.port = 9000  # type: ignore[misc]
