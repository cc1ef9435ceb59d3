"""
App Association Files — Universal Links and Android App Links

Serves the Apple App Site Association (AASA) file and the Android Digital
Asset Links statement so that shared /v/{id} links open directly in the
native app when it is installed. When the app is not installed, the
browser reaches the landing page in videolink.api.videos instead.

Both files must be served with Content-Type application/json. The AASA
file is served at /.well-known/apple-app-site-association
and at the legacy root path /apple-app-site-association.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from videolink.core.config import (
    ANDROID_CERT_FINGERPRINTS,
    ANDROID_PACKAGE,
    APPLE_APP_ID,
    is_apple_app_configured,
)

LANDING_PATH_PATTERN = "/v/*"


def build_aasa_content() -> dict:
    """AASA document claiming the video landing paths for the iOS app."""
    app_ids = [APPLE_APP_ID] if is_apple_app_configured() else []
    return {
        "applinks": {
            "details": [
                {
                    "appIDs": app_ids,
                    "components": [
                        {
                            "/": LANDING_PATH_PATTERN,
                            "comment": "Matches shared video deep links",
                        }
                    ],
                }
            ]
        },
        "webcredentials": {
            "apps": app_ids
        },
    }


def build_asset_links() -> list[dict]:
    """Digital Asset Links statement verifying the Android app's links."""
    return [
        {
            "relation": ["delegate_permission/common.handle_all_urls"],
            "target": {
                "namespace": "android_app",
                "package_name": ANDROID_PACKAGE,
                "sha256_cert_fingerprints": ANDROID_CERT_FINGERPRINTS,
            },
        }
    ]


# --- Router ---

router = APIRouter(tags=["deeplinks"])


@router.get("/.well-known/apple-app-site-association")
async def aasa_well_known():
    """
    Serve the Apple App Site Association file at the standard path.

    Apple fetches this file when the app is installed to determine which
    URL patterns should open in the app instead of Safari.
    """
    return JSONResponse(content=build_aasa_content(), media_type="application/json")


@router.get("/apple-app-site-association")
async def aasa_root():
    """Serve the AASA file at the legacy root path."""
    return JSONResponse(content=build_aasa_content(), media_type="application/json")


@router.get("/.well-known/assetlinks.json")
async def android_asset_links():
    """
    Serve the Android Digital Asset Links file.

    Android verifies App Links against this statement; the certificate
    fingerprints must match the signing key of the released APK.
    """
    return JSONResponse(content=build_asset_links(), media_type="application/json")
