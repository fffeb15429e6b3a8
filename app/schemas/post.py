"""
Blog post content model.

A post body is an ordered list of content blocks. Each block class owns its
``type`` tag, so the tag written to JSON always matches the fields present.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, FrozenSet, List, Optional, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    Tag,
    computed_field,
    model_validator,
)


class StringEnum(str, Enum):
    """Enum backed by lowercase strings, looked up case-insensitively."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return cls.lookup().get(value.lower())
        return None

    @classmethod
    def lookup(cls) -> Dict[str, "StringEnum"]:
        return {member.value: member for member in cls}


def check_string_table(enum_cls) -> None:
    """Fail if a member has no lowercase string or two members share one."""
    values = [member.value for member in enum_cls.__members__.values()]
    if len(set(values)) != len(values):
        raise TypeError(f"{enum_cls.__name__} maps two members to the same string")
    for value in values:
        if not value or value != value.lower():
            raise TypeError(f"{enum_cls.__name__} value {value!r} is not lowercase")


class ContentType(StringEnum):
    MARKDOWN = "markdown"
    CODE = "code"
    TIP = "tip"
    FOLD = "fold"


class TipLevel(StringEnum):
    TIP = "tip"
    WARNING = "warning"
    ERROR = "error"


# TODO: let authors define their own tag categories
class TagType(StringEnum):
    TECH = "tech"


for _enum in (ContentType, TipLevel, TagType):
    check_string_table(_enum)


def _casefold(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


class _ContentBase(BaseModel):
    model_config = ConfigDict(frozen=True, revalidate_instances="always")

    kind: ClassVar[ContentType]

    @computed_field
    @property
    def type(self) -> ContentType:
        return self.kind


class MarkdownContent(_ContentBase):
    kind: ClassVar[ContentType] = ContentType.MARKDOWN

    content: str  # raw markdown / MDX


class TipContent(_ContentBase):
    kind: ClassVar[ContentType] = ContentType.TIP

    level: Annotated[TipLevel, BeforeValidator(_casefold)]
    content: str


class CodeBlock(BaseModel):
    model_config = ConfigDict(frozen=True, revalidate_instances="always")

    language: str
    code: str


class CodeContent(_ContentBase):
    kind: ClassVar[ContentType] = ContentType.CODE

    metadata: List[CodeBlock]


class FoldContent(_ContentBase):
    kind: ClassVar[ContentType] = ContentType.FOLD

    title: str
    content: str


def content_tag(value: Any) -> Optional[str]:
    """Pick the variant tag from raw JSON data or from a block instance."""
    if isinstance(value, dict):
        raw = value.get("type")
        if raw is None:
            return None
        if not isinstance(raw, str):
            return str(raw)
        try:
            return ContentType(raw).value
        except ValueError:
            return raw
    kind = getattr(value, "kind", None)
    return kind.value if kind is not None else None


ContentBlock = Annotated[
    Union[
        Annotated[MarkdownContent, Tag(ContentType.MARKDOWN.value)],
        Annotated[CodeContent, Tag(ContentType.CODE.value)],
        Annotated[TipContent, Tag(ContentType.TIP.value)],
        Annotated[FoldContent, Tag(ContentType.FOLD.value)],
    ],
    Discriminator(content_tag),
]


class Post(BaseModel):
    model_config = ConfigDict(frozen=True, revalidate_instances="always")

    id: str
    title: str
    username: str
    userLink: Optional[str] = None
    contents: List[ContentBlock]
    createdAt: datetime
    updatedAt: datetime
    tags: Optional[FrozenSet[Annotated[TagType, BeforeValidator(_casefold)]]] = None

    @model_validator(mode="after")
    def check_timestamps(self) -> "Post":
        if (self.createdAt.tzinfo is None) != (self.updatedAt.tzinfo is None):
            raise ValueError(
                "createdAt and updatedAt must both be timezone-aware or both naive"
            )
        if self.updatedAt < self.createdAt:
            raise ValueError("updatedAt must not be earlier than createdAt")
        return self
