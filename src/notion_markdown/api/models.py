from typing import Annotated, Any, List, Literal, Optional, Union, get_args
from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


def _flatten_file(value: Any) -> Any:
    """Turn Notion's {"type": "external", "external": {...}} into one flat dict."""
    if isinstance(value, dict):
        kind = value.get("type")
        nested = value.get(kind)
        if kind in ("external", "file", "file_upload") and isinstance(nested, dict):
            return {"type": kind, **nested}
    return value


# Rich text


class Annotations(_Model):
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"


class Link(_Model):
    url: str


class TextContent(_Model):
    content: str = ""
    link: Optional[Link] = None


class TextSpan(_Model):
    type: Literal["text"] = "text"
    text: TextContent = Field(default_factory=TextContent)
    annotations: Annotations = Field(default_factory=Annotations)
    plain_text: str = ""
    href: Optional[str] = None


class Equation(_Model):
    expression: str = ""


class EquationSpan(_Model):
    type: Literal["equation"] = "equation"
    equation: Equation = Field(default_factory=Equation)
    annotations: Annotations = Field(default_factory=Annotations)
    plain_text: str = ""
    href: Optional[str] = None


class MentionSpan(_Model):
    type: Literal["mention"] = "mention"
    mention: dict = Field(default_factory=dict)
    annotations: Annotations = Field(default_factory=Annotations)
    plain_text: str = ""
    href: Optional[str] = None


RichText = Annotated[
    Union[TextSpan, EquationSpan, MentionSpan], Field(discriminator="type")
]


# Files and icons


class ExternalFile(_Model):
    type: Literal["external"] = "external"
    url: str


class HostedFile(_Model):
    type: Literal["file", "file_upload"] = "file"
    url: Optional[str] = None
    expiry_time: Optional[str] = None


class EmojiIcon(_Model):
    type: Literal["emoji"] = "emoji"
    emoji: str


FileSource = Annotated[Union[ExternalFile, HostedFile], Field(discriminator="type")]


class OtherIcon(_Model):
    """Any icon kind without its own model, such as custom_emoji."""

    type: Literal["other"] = "other"
    name: str = ""


ICON_TYPES = ("emoji", "external", "file", "file_upload")

Icon = Annotated[
    Union[EmojiIcon, ExternalFile, HostedFile, OtherIcon], Field(discriminator="type")
]


# Block payloads


class Heading(_Model):
    block_type: Literal["heading_1", "heading_2", "heading_3"]
    rich_text: List[RichText] = Field(default_factory=list)
    color: Optional[str] = None


class TextBlock(_Model):
    block_type: Literal[
        "paragraph", "bulleted_list_item", "numbered_list_item", "quote"
    ]
    rich_text: List[RichText] = Field(default_factory=list)
    color: Optional[str] = None


class Code(_Model):
    block_type: Literal["code"] = "code"
    rich_text: List[RichText] = Field(default_factory=list)
    language: str = "plain text"
    caption: List[RichText] = Field(default_factory=list)


class ToDo(_Model):
    block_type: Literal["to_do"] = "to_do"
    rich_text: List[RichText] = Field(default_factory=list)
    checked: Optional[bool] = None


class Callout(_Model):
    block_type: Literal["callout"] = "callout"
    rich_text: List[RichText] = Field(default_factory=list)
    icon: Optional[Icon] = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_icon(cls, data: Any) -> Any:
        icon = data.get("icon") if isinstance(data, dict) else None
        if isinstance(icon, dict):
            if icon.get("type") in ICON_TYPES:
                icon = _flatten_file(icon)
            else:
                icon = {"type": "other", "name": str(icon.get("type", ""))}
            data = {**data, "icon": icon}
        return data


class Media(_Model):
    """Image or video; Notion stores the file reference inline in the payload."""

    block_type: Literal["image", "video"]
    source: FileSource
    caption: List[RichText] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _lift_source(cls, data: Any) -> Any:
        if isinstance(data, dict) and "source" not in data:
            data = {
                "block_type": data.get("block_type"),
                "caption": data.get("caption", []),
                "source": _flatten_file(data),
            }
        return data


class Divider(_Model):
    block_type: Literal["divider"] = "divider"


class ColumnList(_Model):
    block_type: Literal["column_list"] = "column_list"


class Column(_Model):
    block_type: Literal["column"] = "column"


class Silent(_Model):
    """Block types that are recognised but never rendered."""

    block_type: Literal[
        "table",
        "bookmark",
        "file",
        "pdf",
        "table_of_contents",
        "child_page",
        "child_database",
        "synced_block",
        "template",
        "toggle",
        "breadcrumb",
        "embed",
        "equation",
        "link_preview",
        "table_row",
        "link_to_page",
    ]


class Unsupported(_Model):
    block_type: Literal["unsupported"] = "unsupported"
    name: str = "unsupported"


BLOCK_PAYLOADS = (
    Heading,
    TextBlock,
    Code,
    ToDo,
    Callout,
    Media,
    Divider,
    ColumnList,
    Column,
    Silent,
    Unsupported,
)

BlockType = Annotated[Union[BLOCK_PAYLOADS], Field(discriminator="block_type")]


def block_type_names(payload: type) -> tuple:
    """Return the Notion type tags a payload model accepts."""
    return get_args(payload.model_fields["block_type"].annotation)


KNOWN_BLOCK_TYPES = frozenset(
    name for payload in BLOCK_PAYLOADS for name in block_type_names(payload)
)


class Block(_Model):
    id: str
    has_children: bool = False
    value: BlockType

    @model_validator(mode="before")
    @classmethod
    def _lift_payload(cls, data: Any) -> Any:
        """Accept raw Notion block JSON as returned by blocks.children.list."""
        if not isinstance(data, dict) or "value" in data:
            return data

        block_type = data.get("type", "")
        if block_type in KNOWN_BLOCK_TYPES and block_type != "unsupported":
            payload = {**(data.get(block_type) or {}), "block_type": block_type}
        else:
            payload = {"block_type": "unsupported", "name": block_type or "unsupported"}

        return {
            "id": data.get("id"),
            "has_children": data.get("has_children", False),
            "value": payload,
        }

    @property
    def type(self) -> str:
        return self.value.block_type


class NotionPage(BaseModel):
    id: str
    title: str
    url: str
    type: str
