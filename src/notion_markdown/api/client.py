import logging
from typing import Any, Dict, List, Optional
import httpx
from pydantic import ValidationError
from notion_client import AsyncClient
from notion_client.errors import HTTPResponseError, RequestTimeoutError
from notion_markdown.config import Settings, load_settings
from notion_markdown.errors import FetchFailure, NotionClientError
from notion_markdown.render.blocks import render_blocks
from .models import Block, NotionPage

logger = logging.getLogger(__name__)

API_ERRORS = (HTTPResponseError, RequestTimeoutError, httpx.HTTPError)


def _page_title(page: Dict[str, Any]) -> str:
    """Return the plain text of a page's title property."""
    for prop in page.get("properties", {}).values():
        if prop.get("type") == "title" and prop.get("title"):
            return "".join(item.get("plain_text", "") for item in prop["title"])
    return "Untitled"


class NotionClient:
    def __init__(self, token: Optional[str] = None, settings: Optional[Settings] = None):
        settings = settings or load_settings()
        self.token = token or settings.notion_token
        if not self.token:
            raise ValueError("NOTION_TOKEN not found in environment variables")
        self.client = AsyncClient(auth=self.token, timeout_ms=settings.timeout_ms)

    async def __aenter__(self) -> "NotionClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self.client.aclose()

    async def list_shared_pages(self) -> List[NotionPage]:
        """List all pages shared with the integration, following pagination."""
        pages = []
        has_more = True
        start_cursor = None

        while has_more:
            params = {"filter": {"property": "object", "value": "page"}}
            if start_cursor:
                params["start_cursor"] = start_cursor

            try:
                response = await self.client.search(**params)
            except API_ERRORS as e:
                logger.error("Error listing pages: %s", e)
                raise NotionClientError(f"Error listing pages: {e}") from e

            for page in response.get("results", []):
                pages.append(
                    NotionPage(
                        id=page["id"],
                        title=_page_title(page),
                        url=page.get("url", ""),
                        type="page",
                    )
                )

            has_more = response.get("has_more", False)
            start_cursor = response.get("next_cursor")

        return pages

    async def list_block_children(self, block_id: str) -> List[Block]:
        """Get the direct children of a block, following pagination.

        Raises:
            FetchFailure: The Notion API or the transport failed, or a child
                block could not be parsed.
        """
        blocks = []
        has_more = True
        start_cursor = None

        while has_more:
            params = {"block_id": block_id}
            if start_cursor:
                params["start_cursor"] = start_cursor

            try:
                response = await self.client.blocks.children.list(**params)
            except API_ERRORS as e:
                logger.error("Error getting children of block %s: %s", block_id, e)
                raise FetchFailure(block_id, e) from e

            try:
                blocks.extend(
                    Block.model_validate(block) for block in response.get("results", [])
                )
            except ValidationError as e:
                logger.error("Unreadable children of block %s: %s", block_id, e)
                raise FetchFailure(block_id, e) from e

            has_more = response.get("has_more", False)
            start_cursor = response.get("next_cursor")

        return blocks

    async def render_page(self, page_id: str) -> str:
        """Render the full content of a page as Markdown."""
        blocks = await self.list_block_children(page_id)
        return await render_blocks(self.list_block_children, blocks)
