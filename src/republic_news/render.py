"""Plain-text rendering of the news screen."""

from republic_news.controller.state import SearchState, to_search_result
from republic_news.data import (
    Article,
    DeviceState,
    ErrorResult,
    LoadingResult,
    NoConnection,
    Results,
)

TITLE = "📰 RepublicNews"
UNTITLED = "(Sin título)"
LOADING_TEXT = "Buscando..."
EMPTY_TEXT = "No hay noticias para mostrar."
DIVIDER = "─" * 40


def render_article(article: Article) -> list[str]:
    """Render one article; missing fields are omitted, a missing title is replaced."""
    lines = [article.title or UNTITLED]
    if article.description:
        lines.append(article.description)
    if article.first_author:
        lines.append(f"✍️ {article.first_author}")
    if article.published_at:
        lines.append(f"🕒 {article.published_at}")
    return lines


def render_screen(state: SearchState, device: DeviceState | None) -> str:
    """Render the whole screen for a controller state.

    Args:
        state: Current controller state.
        device: Last sampled device state, or None before the first sample.

    Returns:
        The screen as newline-separated text.
    """
    lines = [TITLE, ""]
    if device is not None:
        lines.append(f"Conexión: {device.connection.label}")
        lines.append(f"🔋 Batería: {device.battery_percent}%")
        lines.append("")

    result = to_search_result(state)
    if isinstance(result, (ErrorResult, NoConnection)):
        lines.append(f"⚠️ {result.message}")
    elif isinstance(result, LoadingResult):
        lines.append(LOADING_TEXT)
    elif isinstance(result, Results):
        for article in result.articles:
            lines.extend(render_article(article))
            lines.append(DIVIDER)
    else:
        lines.append(EMPTY_TEXT)
    return "\n".join(lines)
