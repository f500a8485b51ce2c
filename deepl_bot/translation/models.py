from enum import Enum
from typing import Union
from pydantic import BaseModel, ConfigDict, Field


class EmbedPart(str, Enum):
    TITLE = "title"
    DESCRIPTION = "description"
    AUTHOR_NAME = "author_name"
    FOOTER_TEXT = "footer_text"


class FieldPart(str, Enum):
    NAME = "name"
    VALUE = "value"


class BodySlot(BaseModel):
    """The message's own text content."""

    model_config = ConfigDict(frozen=True)


class ListFieldRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    field_index: int = Field(ge=0)
    part: FieldPart


class EmbedSlot(BaseModel):
    """A text slot inside the embed at ``embed_index``."""

    model_config = ConfigDict(frozen=True)

    embed_index: int = Field(ge=0)
    field: Union[EmbedPart, ListFieldRef]


SlotPath = Union[BodySlot, EmbedSlot]


class TranslatableUnit(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1)
    origin: SlotPath


class TranslationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    detected_source_lang: str
