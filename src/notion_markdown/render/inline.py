from typing import Iterable
from notion_markdown.api.models import RichText, TextSpan


def render_inline(text: RichText) -> str:
    """Render one rich text span as Markdown.

    Bold, italic and code wrap in that order, each around the previous result.
    Equations, mentions and any other non-text span render as an empty string.
    """
    if not isinstance(text, TextSpan):
        return ""

    string = text.text.content

    if text.annotations.bold:
        string = f"**{string}**"

    if text.annotations.italic:
        string = f"*{string}*"

    if text.annotations.code:
        string = f"`{string}`"

    return string


def render_rich_text(spans: Iterable[RichText]) -> str:
    return "".join(render_inline(span) for span in spans)
