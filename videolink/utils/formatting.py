"""
Formatting helpers shared by the server-rendered and client-rendered pages.

Prices come from the catalog as plain numbers in a single local currency.
Anything coming from the catalog or the request path is passed through
escape_html before it is placed in markup.
"""

import html
from typing import Optional, Union

from videolink.core.config import CURRENCY_CODE

ONE_MILLION = 1_000_000

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})

Number = Union[int, float]


def _group_thousands(value: Number) -> str:
    """Format with comma separators; fractions keep up to three decimals."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_price(price: Optional[Number], currency: str = CURRENCY_CODE) -> str:
    """
    Map a catalog price to its display string.

    Examples:
        format_price(0)        -> "KES 0"
        format_price(25000)    -> "KES 25,000"
        format_price(1500000)  -> "KES 1.5M"
        format_price(2000000)  -> "KES 2M"
    """
    if not price:
        return f"{currency} 0"

    if price < ONE_MILLION:
        return f"{currency} {_group_thousands(price)}"

    millions = price / ONE_MILLION
    if millions.is_integer():
        return f"{currency} {int(millions)}M"
    return f"{currency} {millions:.1f}M"


def escape_html(text: object) -> str:
    """Escape the five HTML-reserved characters. Non-strings go through str()."""
    return str(text).translate(_HTML_ESCAPES)


def unescape_html(text: str) -> str:
    """Inverse of escape_html."""
    return html.unescape(text)
