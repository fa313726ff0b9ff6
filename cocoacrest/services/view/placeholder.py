"""Generated SVG placeholder imagery for products."""

from __future__ import annotations

from urllib.parse import quote

from markupsafe import escape

_SVG_TEMPLATE = (
    "<svg xmlns='http://www.w3.org/2000/svg' width='800' height='480'>"
    "<defs><linearGradient id='g' x1='0' x2='1'>"
    "<stop offset='0' stop-color='{color}' stop-opacity='1'/>"
    "<stop offset='1' stop-color='#111111' stop-opacity='0.9'/>"
    "</linearGradient></defs>"
    "<rect width='100%' height='100%' rx='28' fill='url(#g)'/>"
    "<text x='50%' y='50%' dominant-baseline='middle' text-anchor='middle' "
    "fill='rgba(255,255,255,0.95)' font-family='Inter, Arial' font-size='36'>"
    "{label}</text></svg>"
)

# Characters encodeURIComponent leaves untouched.
_URI_SAFE = "-_.!~*'()"


def placeholder_svg(label: str, color: str) -> str:
    return _SVG_TEMPLATE.format(label=escape(label), color=escape(color))


def placeholder_data_uri(label: str, color: str) -> str:
    return "data:image/svg+xml;utf8," + quote(
        placeholder_svg(label, color), safe=_URI_SAFE
    )
