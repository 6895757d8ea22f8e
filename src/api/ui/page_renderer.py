from html import escape

from src.models.search import SearchState
from src.models.weather.weather import WeatherSummary

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="da">
<head>
<meta charset="utf-8">
<title>Vejr App</title>
</head>
<body>
<div class="weather-app">
<h1>&#127780;&#65039; Vejr App</h1>
<form class="controls" method="get" action="/">
<input type="text" name="city" placeholder="Skriv bynavn..." value="{query}">
<button type="submit">S&oslash;g</button>
</form>
{body}
</div>
</body>
</html>
"""


def render_summary(summary: WeatherSummary) -> str:
    """Render a weather summary, omitting every field that is absent."""
    parts = ['<div class="weather-info">', f"<h2>{escape(summary.city)}</h2>"]

    if summary.icon_url:
        alt = escape(summary.description or "Vejr-ikon")
        parts.append(f'<img src="{escape(summary.icon_url)}" alt="{alt}" width="80" height="80">')
    if summary.temp is not None:
        parts.append(f'<p class="temp">{summary.temp}&deg;C</p>')
    if summary.description:
        parts.append(f"<p>{escape(summary.description)}</p>")

    meta = []
    if summary.wind is not None:
        meta.append(f"<span>Vind: {summary.wind} m/s</span>")
    if summary.humidity is not None:
        meta.append(f"<span>Fugt: {summary.humidity}%</span>")
    parts.append(f'<div class="meta">{"".join(meta)}</div>')

    parts.append("</div>")
    return "\n".join(parts)


def render_page(state: SearchState) -> str:
    """Render the search form together with the result or error of the state."""
    if state.error is not None:
        body = f'<p class="error">{escape(state.error.message)}</p>'
    elif state.summary is not None:
        body = render_summary(state.summary)
    else:
        body = ""

    return PAGE_TEMPLATE.format(query=escape(state.query), body=body)
