"""
Common test fixtures for the notion_markdown project.
"""

import pytest
from typing import Dict, List, Optional
from notion_markdown.api.models import Block


def text(content: str, bold=False, italic=False, code=False) -> dict:
    """Build a Notion rich text span of type text."""
    return {
        "type": "text",
        "text": {"content": content, "link": None},
        "annotations": {
            "bold": bold,
            "italic": italic,
            "strikethrough": False,
            "underline": False,
            "code": code,
            "color": "default",
        },
        "plain_text": content,
        "href": None,
    }


def block(block_id: str, block_type: str, payload: Optional[dict] = None, has_children=False) -> Block:
    """Build a Block from the JSON shape returned by blocks.children.list."""
    return Block.model_validate(
        {
            "object": "block",
            "id": block_id,
            "type": block_type,
            block_type: payload if payload is not None else {},
            "has_children": has_children,
        }
    )


def paragraph(block_id: str, content: str) -> Block:
    return block(block_id, "paragraph", {"rich_text": [text(content)], "color": "default"})


class FakeFetcher:
    """Serves children from a dict and records every block id it was asked for."""

    def __init__(self, children: Optional[Dict[str, List[Block]]] = None, failing=()):
        self.children = children or {}
        self.failing = set(failing)
        self.calls = []

    async def __call__(self, block_id: str) -> List[Block]:
        self.calls.append(block_id)
        if block_id in self.failing:
            raise ConnectionError(f"cannot reach children of {block_id}")
        return self.children.get(block_id, [])


@pytest.fixture
def fetcher():
    """Fixture providing a fetcher with no children at all."""
    return FakeFetcher()


@pytest.fixture
def two_column_list():
    """Fixture providing a column list with columns holding "X" and "Y"."""
    columns = block("cl", "column_list", has_children=True)
    children = {
        "cl": [
            block("col-1", "column", has_children=True),
            block("col-2", "column", has_children=True),
        ],
        "col-1": [paragraph("p-x", "X")],
        "col-2": [paragraph("p-y", "Y")],
    }
    return columns, FakeFetcher(children)
