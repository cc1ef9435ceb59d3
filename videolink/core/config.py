"""
Application Configuration

Loads environment variables and provides typed settings
for the landing page service. Uses python-dotenv to load from .env file.
"""

import os
from pathlib import Path
from urllib.parse import urlparse

from dotenv import load_dotenv

# Load .env file from the project root
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _get_list(name: str) -> list[str]:
    value = os.getenv(name, "")
    return [item.strip() for item in value.split(",") if item.strip()]


# --- App Settings ---
API_V1_PREFIX = "/api/v1"
PROJECT_NAME = "videolink"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Catalog API ---
CATALOG_API_URL: str = os.getenv("CATALOG_API_URL", "https://api.weibao.africa").rstrip("/")
CATALOG_TIMEOUT: float = float(os.getenv("CATALOG_TIMEOUT", "10.0"))
# When set, upstream 5xx responses are reported as errors instead of "not found"
CATALOG_STRICT_ERRORS: bool = _get_bool("CATALOG_STRICT_ERRORS")

# --- Branding ---
PUBLIC_BASE_URL: str = os.getenv("PUBLIC_BASE_URL", "https://weibao.africa").rstrip("/")
BRAND_NAME: str = os.getenv("BRAND_NAME", "WeiBao")
SITE_NAME: str = os.getenv("SITE_NAME", "WeiBao Marketplace")
CURRENCY_CODE: str = os.getenv("CURRENCY_CODE", "KES")

# --- Native App ---
APP_SCHEME: str = os.getenv("APP_SCHEME", "weibao")
ANDROID_PACKAGE: str = os.getenv("ANDROID_PACKAGE", "com.weibao.app")
ANDROID_CERT_FINGERPRINTS: list[str] = _get_list("ANDROID_CERT_FINGERPRINTS")
APPLE_APP_ID: str = os.getenv("APPLE_APP_ID", "")  # Team ID + Bundle ID
IOS_APP_STORE_ID: str = os.getenv("IOS_APP_STORE_ID", "")

# --- Store Fallback ---
_DEFAULT_DOWNLOAD_URL = "https://app.weibao.africa/weibao.apk"
ANDROID_STORE_URL: str = os.getenv("ANDROID_STORE_URL", _DEFAULT_DOWNLOAD_URL)
IOS_STORE_URL: str = os.getenv("IOS_STORE_URL", _DEFAULT_DOWNLOAD_URL)
DEEP_LINK_DELAY_MS: int = int(os.getenv("DEEP_LINK_DELAY_MS", "100"))
STORE_FALLBACK_DELAY_MS: int = int(os.getenv("STORE_FALLBACK_DELAY_MS", "2000"))


def _is_absolute_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_catalog_config() -> bool:
    """Check that the catalog and public URLs are present and absolute."""
    invalid = []
    if not _is_absolute_url(CATALOG_API_URL):
        invalid.append("CATALOG_API_URL")
    if not _is_absolute_url(PUBLIC_BASE_URL):
        invalid.append("PUBLIC_BASE_URL")
    if invalid:
        raise EnvironmentError(
            f"Missing or invalid URL environment variables: {', '.join(invalid)}. "
            f"Please fill in your .env file at: {_env_path}"
        )
    return True


def is_smart_banner_configured() -> bool:
    """
    Check if the iOS Smart App Banner can be rendered.

    The banner needs the numeric App Store id; without it the meta tag
    is omitted from the landing page.
    """
    return bool(IOS_APP_STORE_ID)


def is_apple_app_configured() -> bool:
    """Check if an Apple Team ID + Bundle ID is available for the AASA file."""
    return bool(APPLE_APP_ID)
