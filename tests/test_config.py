"""
Tests for application configuration helpers and URL builders.

Run with: pytest tests/test_config.py -v
"""

from unittest.mock import patch

import pytest

from videolink.core import config
from videolink.utils import links


class TestValidateCatalogConfig:
    """Test validation of the catalog and public URLs."""

    def test_valid_urls_pass(self):
        with patch.object(config, "CATALOG_API_URL", "https://api.example.com"), \
             patch.object(config, "PUBLIC_BASE_URL", "https://example.com"):
            assert config.validate_catalog_config() is True

    def test_missing_catalog_url_raises(self):
        with patch.object(config, "CATALOG_API_URL", ""), \
             patch.object(config, "PUBLIC_BASE_URL", "https://example.com"):
            with pytest.raises(EnvironmentError, match="CATALOG_API_URL"):
                config.validate_catalog_config()

    def test_relative_public_url_raises(self):
        with patch.object(config, "CATALOG_API_URL", "https://api.example.com"), \
             patch.object(config, "PUBLIC_BASE_URL", "/landing"):
            with pytest.raises(EnvironmentError, match="PUBLIC_BASE_URL"):
                config.validate_catalog_config()


class TestConfigFlags:
    """Test the boolean configuration helpers."""

    def test_smart_banner_requires_store_id(self):
        with patch.object(config, "IOS_APP_STORE_ID", ""):
            assert config.is_smart_banner_configured() is False
        with patch.object(config, "IOS_APP_STORE_ID", "123456789"):
            assert config.is_smart_banner_configured() is True

    def test_apple_app_requires_app_id(self):
        with patch.object(config, "APPLE_APP_ID", ""):
            assert config.is_apple_app_configured() is False

    @pytest.mark.parametrize("raw, expected", [
        ("true", True), ("1", True), ("YES", True), ("false", False), ("0", False),
    ])
    def test_bool_parsing(self, raw, expected, monkeypatch):
        monkeypatch.setenv("VIDEOLINK_TEST_FLAG", raw)
        assert config._get_bool("VIDEOLINK_TEST_FLAG") is expected

    def test_bool_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("VIDEOLINK_TEST_FLAG", raising=False)
        assert config._get_bool("VIDEOLINK_TEST_FLAG", default=True) is True

    def test_list_parsing(self, monkeypatch):
        monkeypatch.setenv("VIDEOLINK_TEST_LIST", "AA:BB, CC:DD ,,")
        assert config._get_list("VIDEOLINK_TEST_LIST") == ["AA:BB", "CC:DD"]


class TestLinks:
    """Test URL builders for video identifiers."""

    def test_app_url(self):
        with patch.object(links, "APP_SCHEME", "weibao"):
            assert links.app_url("vid-1") == "weibao://video/vid-1"

    def test_share_and_player_urls(self):
        with patch.object(links, "PUBLIC_BASE_URL", "https://example.com"):
            assert links.share_url("vid-1") == "https://example.com/v/vid-1"
            assert links.player_url("vid-1") == "https://example.com/v/vid-1/player"

    def test_catalog_url(self):
        with patch.object(links, "CATALOG_API_URL", "https://api.example.com"):
            assert links.catalog_video_url("vid-1") == "https://api.example.com/api/v1/videos/vid-1"

    def test_identifier_encoded_as_single_segment(self):
        with patch.object(links, "APP_SCHEME", "weibao"):
            assert links.app_url("a/b c") == "weibao://video/a%2Fb%20c"
