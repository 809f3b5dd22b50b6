"""Pydantic schemas for declarative mail descriptions."""

from __future__ import annotations

from typing import Annotated
from typing import List
from typing import Literal
from typing import Optional
from typing import Union

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class _ComponentSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")


class TitleSchema(_ComponentSchema):
    """Title component schema."""

    type: Literal["title"]
    brand_name: str
    title: str
    logo_uri: str
    separator_color: str = "black"
    background_color: str = "transparent"
    brand_font_color: str = "black"


class TextSchema(_ComponentSchema):
    """Text component schema."""

    type: Literal["text"]
    text: str
    align: str = "left"
    style: Optional[str] = None
    padding_bottom: Optional[str] = None


class SeparatorSchema(_ComponentSchema):
    """Separator component schema."""

    type: Literal["separator"]


class ImageSchema(_ComponentSchema):
    """Image component schema."""

    type: Literal["image"]
    url: str
    width: str


class ButtonSchema(_ComponentSchema):
    """Button component schema."""

    type: Literal["button"]
    text: str
    target: str
    align: str = "left"
    color: str = "blue"


class FooterSchema(_ComponentSchema):
    """Footer component schema."""

    type: Literal["footer"]
    entry_sentence: str
    company_name: str
    phone: str
    email: str
    street: str
    zip_code: str
    city: str


class RowSchema(_ComponentSchema):
    """Row component schema."""

    type: Literal["row"]
    children: List[ComponentSchema] = Field(default_factory=list)


class ColumnSchema(_ComponentSchema):
    """Column component schema."""

    type: Literal["column"]
    width: int
    children: List[ComponentSchema] = Field(default_factory=list)


ComponentSchema = Annotated[
    Union[
        TitleSchema,
        TextSchema,
        SeparatorSchema,
        ImageSchema,
        ButtonSchema,
        FooterSchema,
        RowSchema,
        ColumnSchema,
    ],
    Field(discriminator="type"),
]

RowSchema.model_rebuild()
ColumnSchema.model_rebuild()


class DocumentSchema(BaseModel):
    """A whole mail: its ordered top-level components."""

    model_config = ConfigDict(extra="forbid")

    components: List[ComponentSchema] = Field(default_factory=list)


class RenderRequest(DocumentSchema):
    """Body of a render request, optionally asking for delivery."""

    subject: Optional[str] = None
    body_text: Optional[str] = None
    to: List[str] = Field(default_factory=list)


class RenderResponse(BaseModel):
    """Body of a successful render response."""

    html: str
    sent: bool = False
