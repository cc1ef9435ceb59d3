"""
Landing Page Rendering — HTML documents for video deep links.

Renders the server-side landing page (Open Graph / Twitter Card metadata,
product details, and the deep-link script), the client-rendered shell that
loads the same data from the JSON endpoint, the embeddable player used by
twitter:player, and the fixed not-found / error documents.

Every value that comes from the catalog or the request path goes through
escape_html before it lands in markup. Values handed to inline scripts
are serialized with _js_value so they cannot close the <script> element.
"""

import json
from urllib.parse import quote

from videolink.core.config import (
    ANDROID_STORE_URL,
    API_V1_PREFIX,
    BRAND_NAME,
    DEEP_LINK_DELAY_MS,
    IOS_APP_STORE_ID,
    IOS_STORE_URL,
    SITE_NAME,
    STORE_FALLBACK_DELAY_MS,
    is_smart_banner_configured,
)
from videolink.models.videos import VideoRecord
from videolink.utils.formatting import escape_html, format_price
from videolink.utils.links import android_app_url, app_url, player_url, share_url

# Declared preview dimensions (portrait 9:16 product videos)
MEDIA_WIDTH = 720
MEDIA_HEIGHT = 1280
VIDEO_MIME_TYPE = "video/mp4"

# ======================================================================
# Shared fragments
# ======================================================================

_LANDING_STYLES = """
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
      background: #000;
      color: #fff;
      font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
      display: flex;
      align-items: center;
      justify-content: center;
      min-height: 100vh;
      padding: 20px;
    }
    .container { max-width: 500px; text-align: center; width: 100%; }
    .thumbnail {
      width: 100%;
      max-width: 400px;
      border-radius: 12px;
      margin-bottom: 20px;
      box-shadow: 0 4px 20px rgba(0,0,0,0.5);
    }
    h1 { font-size: 24px; font-weight: bold; margin-bottom: 12px; line-height: 1.4; }
    .price { color: #4CAF50; font-size: 28px; font-weight: bold; margin-bottom: 8px; }
    .seller { color: #aaa; font-size: 16px; margin-bottom: 32px; }
    .status { font-size: 18px; margin-bottom: 8px; }
    .hint { font-size: 14px; color: #888; margin-bottom: 24px; }
    .button {
      display: inline-block;
      padding: 16px 32px;
      background: #FF6B6B;
      color: #fff;
      text-decoration: none;
      border-radius: 8px;
      font-size: 16px;
      font-weight: bold;
      margin: 6px;
      transition: background 0.3s;
    }
    .button:hover { background: #E55353; }
    .button-secondary { background: transparent; border: 2px solid #fff; }
    .button-secondary:hover { background: rgba(255,255,255,0.1); }
"""

_MESSAGE_STYLES = (
    "body{background:#000;color:#fff;font-family:system-ui;display:flex;"
    "align-items:center;justify-content:center;min-height:100vh;"
    "text-align:center;padding:20px}"
)

# Defines startDeepLink(appUrl). Both timers are tracked so that leaving
# the page (or the app taking over) cancels any pending navigation.
_DEEP_LINK_JS = """
    function startDeepLink(appUrl) {
      var timers = [];
      function schedule(fn, delay) { timers.push(setTimeout(fn, delay)); }
      function cancelAll() {
        while (timers.length) { clearTimeout(timers.pop()); }
      }
      window.addEventListener('pagehide', cancelAll);
      document.addEventListener('visibilitychange', function () {
        if (document.hidden) { cancelAll(); }
      });

      schedule(function () {
        window.location.href = appUrl;

        // Still here after the fallback delay: the app is not installed
        schedule(function () {
          if (document.hidden) { return; }
          var ua = navigator.userAgent;
          if (/Android/i.test(ua)) {
            window.location.href = DEEP_LINK_CONFIG.androidStoreUrl;
          } else if (/iPhone|iPad|iPod/i.test(ua)) {
            window.location.href = DEEP_LINK_CONFIG.iosStoreUrl;
          }
        }, DEEP_LINK_CONFIG.fallbackDelay);
      }, DEEP_LINK_CONFIG.deepLinkDelay);

      return cancelAll;
    }
"""


def _js_value(value: object) -> str:
    """Serialize a value as a JavaScript literal safe inside <script>."""
    return (
        json.dumps(value)
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
    )


def deep_link_script() -> str:
    """Inline script defining startDeepLink() with the configured store URLs."""
    config = {
        "androidStoreUrl": ANDROID_STORE_URL,
        "iosStoreUrl": IOS_STORE_URL,
        "deepLinkDelay": DEEP_LINK_DELAY_MS,
        "fallbackDelay": STORE_FALLBACK_DELAY_MS,
    }
    return f"var DEEP_LINK_CONFIG = {_js_value(config)};\n{_DEEP_LINK_JS}"


def _message_page(title: str, heading: str, message: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en"><head><meta charset="utf-8"><meta name="viewport" content="width=device-width, initial-scale=1"><title>{title}</title><style>
{_MESSAGE_STYLES}
</style></head><body><div><h1>{heading}</h1><p>{message}</p></div></body></html>"""


# ======================================================================
# Server-rendered landing page
# ======================================================================

def _app_meta_tags(video_id: str) -> str:
    tags = []
    if is_smart_banner_configured():
        app_argument = escape_html(app_url(video_id))
        tags.append(
            f'<meta name="apple-itunes-app" '
            f'content="app-id={escape_html(IOS_APP_STORE_ID)}, app-argument={app_argument}" />'
        )
    tags.append(f'<link rel="alternate" href="{escape_html(android_app_url(video_id))}" />')
    return "\n  ".join(tags)


def render_video_page(video: VideoRecord, video_id: str) -> str:
    """
    Render the full landing page for a video.

    Args:
        video: Record returned by the catalog.
        video_id: Identifier from the request path; used for the canonical
            URL and the deep link so shared links stay stable.

    Returns:
        A complete HTML document.
    """
    price = format_price(video.price)
    caption = escape_html(video.caption)
    seller = escape_html(video.user_name)
    thumbnail = escape_html(video.thumbnail_url)
    video_src = escape_html(video.video_url)
    deep_link = escape_html(app_url(video_id))

    title = f"{caption} - {price}"
    description = f"Buy this product from {seller} on {escape_html(BRAND_NAME)}"
    summary = f"Buy {caption} for {price} from {seller} on {escape_html(BRAND_NAME)}"

    thumbnail_tag = (
        f'<img src="{thumbnail}" alt="{caption}" class="thumbnail">'
        if video.thumbnail_url else ""
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{title} | {escape_html(BRAND_NAME)}</title>
  <meta name="description" content="{summary}" />

  <!-- Open Graph -->
  <meta property="og:type" content="video.other" />
  <meta property="og:url" content="{escape_html(share_url(video_id))}" />
  <meta property="og:title" content="{title}" />
  <meta property="og:description" content="{description}" />
  <meta property="og:image" content="{thumbnail}" />
  <meta property="og:image:width" content="{MEDIA_WIDTH}" />
  <meta property="og:image:height" content="{MEDIA_HEIGHT}" />
  <meta property="og:video" content="{video_src}" />
  <meta property="og:video:secure_url" content="{video_src}" />
  <meta property="og:video:type" content="{VIDEO_MIME_TYPE}" />
  <meta property="og:video:width" content="{MEDIA_WIDTH}" />
  <meta property="og:video:height" content="{MEDIA_HEIGHT}" />
  <meta property="og:site_name" content="{escape_html(SITE_NAME)}" />

  <!-- Twitter Card -->
  <meta name="twitter:card" content="player" />
  <meta name="twitter:title" content="{title}" />
  <meta name="twitter:description" content="{description}" />
  <meta name="twitter:image" content="{thumbnail}" />
  <meta name="twitter:player" content="{escape_html(player_url(video_id))}" />
  <meta name="twitter:player:width" content="{MEDIA_WIDTH}" />
  <meta name="twitter:player:height" content="{MEDIA_HEIGHT}" />

  {_app_meta_tags(video_id)}

  <style>{_LANDING_STYLES}</style>

  <script>
    {deep_link_script()}
    startDeepLink({_js_value(app_url(video_id))});
  </script>
</head>
<body>
  <div class="container">
    {thumbnail_tag}
    <h1>{caption}</h1>
    <p class="price">{price}</p>
    <p class="seller">Sold by {seller}</p>
    <div>
      <p class="status">Opening {escape_html(BRAND_NAME)} app...</p>
      <p class="hint">Don't have the app? You'll be redirected to download it.</p>
    </div>
    <div>
      <a href="{deep_link}" class="button">Open in App</a>
      <a href="{video_src}" class="button button-secondary">View Video</a>
    </div>
  </div>
</body>
</html>"""


def render_player_page(video: VideoRecord) -> str:
    """Minimal HTML5 player, embeddable as the twitter:player iframe."""
    poster = (
        f' poster="{escape_html(video.thumbnail_url)}"' if video.thumbnail_url else ""
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{escape_html(video.caption)} | {escape_html(BRAND_NAME)}</title>
  <style>
    body {{ margin: 0; padding: 0; background: #000; display: flex;
           justify-content: center; align-items: center; min-height: 100vh; }}
    video {{ max-width: 100%; max-height: 100vh; width: 100%; }}
  </style>
</head>
<body>
  <video controls playsinline{poster}>
    <source src="{escape_html(video.video_url)}" type="{VIDEO_MIME_TYPE}">
    Your browser does not support the video tag.
  </video>
</body>
</html>"""


# ======================================================================
# Client-rendered landing page
# ======================================================================

_CLIENT_JS = """
    var root = document.getElementById('root');

    function el(tag, className, text) {
      var node = document.createElement(tag);
      if (className) { node.className = className; }
      if (text) { node.textContent = text; }
      return node;
    }

    function showError(message) {
      document.title = 'Video Not Found - ' + CLIENT_CONFIG.brand;
      root.innerHTML = '';
      root.appendChild(el('h1', '', 'Video Not Found'));
      root.appendChild(el('p', 'hint', message));
    }

    function showVideo(video) {
      document.title = video.caption + ' - ' + video.formattedPrice + ' | ' + CLIENT_CONFIG.brand;
      root.innerHTML = '';
      if (video.thumbnailUrl) {
        var img = el('img', 'thumbnail');
        img.src = video.thumbnailUrl;
        img.alt = video.caption;
        root.appendChild(img);
      }
      root.appendChild(el('h1', '', video.caption));
      root.appendChild(el('p', 'price', video.formattedPrice));
      root.appendChild(el('p', 'seller', 'Sold by ' + video.userName));
      var cta = el('div');
      cta.appendChild(el('p', 'status', 'Opening ' + CLIENT_CONFIG.brand + ' app...'));
      cta.appendChild(el('p', 'hint', "Don't have the app? You'll be redirected to download it."));
      root.appendChild(cta);
      var links = el('div');
      var open = el('a', 'button', 'Open in App');
      open.href = video.appUrl;
      var view = el('a', 'button button-secondary', 'View Video');
      view.href = video.videoUrl;
      links.appendChild(open);
      links.appendChild(view);
      root.appendChild(links);
      startDeepLink(video.appUrl);
    }

    fetch(CLIENT_CONFIG.apiUrl, { headers: { 'Accept': 'application/json' } })
      .then(function (response) {
        if (response.status === 404) {
          showError('Video not found');
          return null;
        }
        if (!response.ok) { throw new Error('HTTP ' + response.status); }
        return response.json();
      })
      .then(function (video) { if (video) { showVideo(video); } })
      .catch(function (err) {
        console.error('Error fetching video:', err);
        showError('Failed to load video');
      });
"""


def render_client_page(video_id: str) -> str:
    """
    Render the client-rendered shell for a video.

    The document starts in the loading state and fetches the video from
    the JSON endpoint in the browser, then switches to the success or
    error view. The deep link is only attempted after a successful load.
    """
    config = {
        "apiUrl": f"{API_V1_PREFIX}/videos/{quote(video_id, safe='')}",
        "brand": BRAND_NAME,
    }
    brand = escape_html(BRAND_NAME)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Loading... - {brand}</title>
  <style>{_LANDING_STYLES}</style>
</head>
<body>
  <div class="container" id="root">
    <p class="status">Loading product...</p>
  </div>
  <script>
    {deep_link_script()}
    var CLIENT_CONFIG = {_js_value(config)};
    {_CLIENT_JS}
  </script>
</body>
</html>"""


# ======================================================================
# Not-found / error documents
# ======================================================================

def render_not_found_page() -> str:
    """Fixed page for videos the catalog does not know about."""
    return _message_page(
        "Video Not Found",
        "Video Not Found",
        "This video may have been removed or is no longer available.",
    )


def render_error_page(message: str) -> str:
    """Page shown when the lookup failed; the message is escaped."""
    return _message_page("Error", "Error Loading Video", escape_html(message))
