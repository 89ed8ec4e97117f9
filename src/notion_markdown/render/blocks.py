import logging
from typing import Awaitable, Callable, List, Optional, Sequence
from notion_markdown.api.models import (
    Block,
    Callout,
    Code,
    Column,
    ColumnList,
    Divider,
    EmojiIcon,
    ExternalFile,
    Heading,
    Media,
    Silent,
    TextBlock,
    ToDo,
    Unsupported,
)
from notion_markdown.errors import FetchFailure
from notion_markdown.render.inline import render_rich_text

_logger = logging.getLogger(__name__)

ChildFetcher = Callable[[str], Awaitable[List[Block]]]

HEADING_PREFIXES = {"heading_1": "#", "heading_2": "##", "heading_3": "###"}

TEXT_PREFIXES = {
    "paragraph": "",
    "bulleted_list_item": "* ",
    "numbered_list_item": "1. ",
    "quote": "> ",
}

MEDIA_TAGS = {
    "image": '<img style="margin: 0 auto" src="{url}">',
    "video": '<video controls src="{url}" />',
}


async def render_blocks(
    fetch_children: ChildFetcher,
    blocks: Sequence[Block],
    logger: Optional[logging.Logger] = None,
) -> str:
    """Render sibling blocks to one Markdown document.

    Args:
        fetch_children: Coroutine function returning the direct children of a
            block id. Only column lists call it.
        blocks: Blocks in document order.
        logger: Where unsupported block types are reported. Defaults to this
            module's logger.

    Returns:
        The rendered fragments joined by a blank line. Blocks without output
        leave no trace in the result.

    Raises:
        FetchFailure: A child fetch failed while expanding a column list.
    """
    log = logger or _logger
    output = []

    for block in blocks:
        fragment = await _render_block(fetch_children, block, log)
        if fragment is not None:
            output.append(fragment)

    return "\n\n".join(output)


async def _render_block(
    fetch_children: ChildFetcher, block: Block, log: logging.Logger
) -> Optional[str]:
    value = block.value

    if isinstance(value, Heading):
        prefix = HEADING_PREFIXES[value.block_type]
        return f"{prefix} {render_rich_text(value.rich_text)}"
    elif isinstance(value, TextBlock):
        # TODO: recurse into children of list items and quotes
        return TEXT_PREFIXES[value.block_type] + render_rich_text(value.rich_text)
    elif isinstance(value, Code):
        content = render_rich_text(value.rich_text)
        return f"```{value.language}\n{content}\n```"
    elif isinstance(value, ToDo):
        checked = "x" if value.checked else " "
        return f"[{checked}] {render_rich_text(value.rich_text)}"
    elif isinstance(value, Callout):
        icon = value.icon.emoji if isinstance(value.icon, EmojiIcon) else ""
        return f"> {icon} {render_rich_text(value.rich_text)}"
    elif isinstance(value, Media):
        # TODO: re-upload Notion-hosted files so their expiring URLs can be used
        if isinstance(value.source, ExternalFile):
            return MEDIA_TAGS[value.block_type].format(url=value.source.url)
        return None
    elif isinstance(value, Divider):
        return "---"
    elif isinstance(value, ColumnList):
        if not block.has_children:
            return None
        return await _render_column_list(fetch_children, block, log)
    elif isinstance(value, (Column, Silent)):
        return None
    elif isinstance(value, Unsupported):
        log.warning("Did not catch %s", value.name)
        return None

    raise TypeError(f"No renderer for block payload {type(value).__name__}")


async def _render_column_list(
    fetch_children: ChildFetcher, block: Block, log: logging.Logger
) -> str:
    columns = await _fetch(fetch_children, block.id)

    content = []
    for column in columns:
        children = await _fetch(fetch_children, column.id)
        content.append(await render_blocks(fetch_children, children, log))

    inner = "\n".join(f'<div style="margin: 0 16px">{column}</div>' for column in content)
    return f'<div style="display: flex;">{inner}</div>'


async def _fetch(fetch_children: ChildFetcher, block_id: str) -> List[Block]:
    try:
        return await fetch_children(block_id)
    except FetchFailure:
        raise
    except Exception as e:
        raise FetchFailure(block_id, e) from e
