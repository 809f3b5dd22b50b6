"""Build component trees from declarative descriptions."""

from __future__ import annotations

from typing import Any
from typing import Mapping
from typing import TypeVar

from pydantic import ValidationError as PydanticValidationError

from mailbuilder.api.schemas import (
    ButtonSchema,
    ColumnSchema,
    ComponentSchema,
    DocumentSchema,
    FooterSchema,
    ImageSchema,
    RowSchema,
    SeparatorSchema,
    TextSchema,
    TitleSchema,
)
from mailbuilder.components.base import MailComponent
from mailbuilder.components.catalog import (
    ButtonComponent,
    ColumnComponent,
    FooterComponent,
    ImageComponent,
    RowComponent,
    SeparatorComponent,
    TextComponent,
    TitleComponent,
)
from mailbuilder.components.document import MailBuilder
from mailbuilder.exceptions import ValidationError

DocumentSchemaT = TypeVar("DocumentSchemaT", bound=DocumentSchema)


def parse_document(
    payload: Mapping[str, Any],
    schema: type[DocumentSchemaT] = DocumentSchema,  # type: ignore[assignment]
) -> DocumentSchemaT:
    """Validate a raw description, mapping pydantic errors to ours."""
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise _to_validation_error(exc) from exc


def build_document(payload: Mapping[str, Any] | DocumentSchema) -> MailBuilder:
    """Build a ``MailBuilder`` from a description.

    Args:
        payload: Either a validated ``DocumentSchema`` or a raw mapping
            such as ``{"components": [{"type": "text", "text": "hi"}]}``.

    Returns:
        The root of the component tree, ready to render.

    Raises:
        ValidationError: If the description is malformed.
    """
    schema = payload if isinstance(payload, DocumentSchema) else parse_document(payload)
    return MailBuilder(build_component(item) for item in schema.components)


def build_component(schema: ComponentSchema) -> MailComponent:
    """Convert one validated schema node (and its subtree) to a component."""
    if isinstance(schema, TitleSchema):
        return TitleComponent(
            brand_name=schema.brand_name,
            title=schema.title,
            logo_uri=schema.logo_uri,
            separator_color=schema.separator_color,
            background_color=schema.background_color,
            brand_font_color=schema.brand_font_color,
        )
    if isinstance(schema, TextSchema):
        text = TextComponent(schema.text, align=schema.align)
        if schema.style is not None:
            text.style = schema.style
        if schema.padding_bottom is not None:
            text.padding_bottom = schema.padding_bottom
        return text
    if isinstance(schema, SeparatorSchema):
        return SeparatorComponent()
    if isinstance(schema, ImageSchema):
        return ImageComponent(schema.url, schema.width)
    if isinstance(schema, ButtonSchema):
        return ButtonComponent(
            schema.text,
            schema.target,
            align=schema.align,
            color=schema.color,
        )
    if isinstance(schema, FooterSchema):
        return FooterComponent(
            entry_sentence=schema.entry_sentence,
            company_name=schema.company_name,
            phone=schema.phone,
            email=schema.email,
            street=schema.street,
            zip_code=schema.zip_code,
            city=schema.city,
        )
    if isinstance(schema, RowSchema):
        return RowComponent(build_component(child) for child in schema.children)
    if isinstance(schema, ColumnSchema):
        return ColumnComponent(
            schema.width,
            (build_component(child) for child in schema.children),
        )
    raise ValidationError(f"Unsupported component type: {type(schema).__name__}", field="type")


def _to_validation_error(exc: PydanticValidationError) -> ValidationError:
    errors = exc.errors()
    if not errors:
        return ValidationError("Invalid mail description")
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return ValidationError(first.get("msg", "Invalid mail description"), field=location or None)
