from typing import Optional


class NotionMarkdownError(Exception):
    """Base class for errors raised by notion_markdown."""


class NotionClientError(NotionMarkdownError):
    """A call to the Notion API failed."""


class FetchFailure(NotionClientError):
    """Fetching the children of a block failed, so its subtree cannot be rendered."""

    def __init__(self, block_id: str, cause: Optional[BaseException] = None):
        self.block_id = block_id
        self.cause = cause
        message = f"Failed to fetch children of block {block_id}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
