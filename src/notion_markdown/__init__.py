from notion_markdown.errors import FetchFailure, NotionClientError, NotionMarkdownError
from notion_markdown.render.blocks import ChildFetcher, render_blocks
from notion_markdown.render.inline import render_inline, render_rich_text

__version__ = "0.1.0"
