"""Built-in component catalog.

Each component supplies only its template id and the placeholder values
its fragment expects. Attributes documented as mutable can be changed
after construction; the new value is picked up on the next render.
"""

from __future__ import annotations

from typing import Iterable

from mailbuilder.components.base import ContainerComponent, LeafComponent, MailComponent
from mailbuilder.templates.types import PlaceholderMap


class TitleComponent(LeafComponent):
    """Title block of a mail: brand logo and name above the mail title.

    Args:
        brand_name: Name of your brand.
        title: Title of the mail.
        logo_uri: URI of the logo image.
        separator_color: Color of the line separating title and content.
        background_color: Background color of the title block.
        brand_font_color: Font color of the brand name.
    """

    template_id = "title"

    def __init__(
        self,
        brand_name: str,
        title: str,
        logo_uri: str,
        separator_color: str = "black",
        background_color: str = "transparent",
        brand_font_color: str = "black",
    ) -> None:
        super().__init__(title)
        self.brand_name = brand_name
        self.logo_uri = logo_uri
        self.separator_color = separator_color
        self.background_color = background_color
        self.brand_font_color = brand_font_color

    @property
    def title(self) -> str:
        return self.content

    def placeholders(self) -> PlaceholderMap:
        return {
            "logo": str(self.logo_uri),
            "brand": self.brand_name,
            "backgroundColor": self.background_color,
            "separatorColor": self.separator_color,
            "brandFontColor": self.brand_font_color,
        }


class TextComponent(LeafComponent):
    """Paragraph of text.

    ``align``, ``style`` (inline CSS) and ``padding_bottom`` are mutable.
    """

    template_id = "text_left"

    def __init__(self, text: str, align: str = "left") -> None:
        super().__init__(text)
        self.align = align
        self.style = "font-size: 14px; line-height: 16px"
        self.padding_bottom = "10px"

    def placeholders(self) -> PlaceholderMap:
        return {
            "align": self.align,
            "style": self.style,
            "padding_bottom": self.padding_bottom,
        }


class SeparatorComponent(LeafComponent):
    """Horizontal rule separating blocks of content."""

    template_id = "separator"

    def __init__(self) -> None:
        super().__init__("")


class ImageComponent(LeafComponent):
    """Image referenced by URL; ``width`` is a CSS width and is mutable."""

    template_id = "image"

    def __init__(self, url: str, width: str) -> None:
        super().__init__(url)
        self.width = width

    def placeholders(self) -> PlaceholderMap:
        return {"width": self.width}


class ButtonComponent(LeafComponent):
    """Call-to-action link styled as a button.

    Args:
        text: Label of the button.
        target: URL the button links to.
        align: Alignment of the button (left, center, right).
        color: Background color of the button.
    """

    template_id = "button"

    def __init__(
        self,
        text: str,
        target: str,
        align: str = "left",
        color: str = "blue",
    ) -> None:
        super().__init__(text)
        self.target = target
        self.align = align
        self.color = color

    def placeholders(self) -> PlaceholderMap:
        return {
            "target": self.target,
            "align": self.align,
            "color": self.color,
        }


class FooterComponent(LeafComponent):
    """Footer with an entry sentence and the company's contact details."""

    template_id = "footer"

    def __init__(
        self,
        entry_sentence: str,
        company_name: str,
        phone: str,
        email: str,
        street: str,
        zip_code: str,
        city: str,
    ) -> None:
        super().__init__(company_name)
        self.entry_sentence = entry_sentence
        self.company_name = company_name
        self.phone = phone
        self.email = email
        self.street = street
        self.zip_code = zip_code
        self.city = city

    def placeholders(self) -> PlaceholderMap:
        return {
            "entrySentence": self.entry_sentence,
            "companyName": self.company_name,
            "phone": self.phone,
            "email": self.email,
            "street": self.street,
            "zipCode": self.zip_code,
            "city": self.city,
        }


class RowComponent(ContainerComponent):
    """Horizontal row; its children are usually ``ColumnComponent``s."""

    template_id = "row"

    def __init__(self, children: Iterable[MailComponent] = ()) -> None:
        super().__init__(children)


class ColumnComponent(ContainerComponent):
    """Column inside a row.

    ``width`` is a bootstrap-style grid width (2-12) and is mutable.
    """

    template_id = "col"

    def __init__(self, width: int, children: Iterable[MailComponent] = ()) -> None:
        super().__init__(children)
        self.width = width

    def placeholders(self) -> PlaceholderMap:
        return {"width": str(self.width)}
