"""Mail components: the core node model and the built-in catalog."""

from mailbuilder.components.base import (
    ContainerComponent,
    LeafComponent,
    MailComponent,
)
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

__all__ = [
    "ButtonComponent",
    "ColumnComponent",
    "ContainerComponent",
    "FooterComponent",
    "ImageComponent",
    "LeafComponent",
    "MailBuilder",
    "MailComponent",
    "RowComponent",
    "SeparatorComponent",
    "TextComponent",
    "TitleComponent",
]
