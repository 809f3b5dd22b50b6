"""Compose HTML mails from nested template components."""

from mailbuilder.components import (
    ButtonComponent,
    ColumnComponent,
    ContainerComponent,
    FooterComponent,
    ImageComponent,
    LeafComponent,
    MailBuilder,
    MailComponent,
    RowComponent,
    SeparatorComponent,
    TextComponent,
    TitleComponent,
)
from mailbuilder.exceptions import (
    MailBuilderError,
    TemplateNotFound,
    TemplateNotFoundError,
    ValidationError,
)
from mailbuilder.templates import (
    DictTemplateSource,
    TemplateSource,
    substitute,
)

__all__ = [
    "ButtonComponent",
    "ColumnComponent",
    "ContainerComponent",
    "DictTemplateSource",
    "FooterComponent",
    "ImageComponent",
    "LeafComponent",
    "MailBuilder",
    "MailBuilderError",
    "MailComponent",
    "RowComponent",
    "SeparatorComponent",
    "TemplateNotFound",
    "TemplateNotFoundError",
    "TemplateSource",
    "TextComponent",
    "TitleComponent",
    "ValidationError",
    "substitute",
]
