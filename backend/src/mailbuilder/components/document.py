"""Document builder: the root of a mail tree."""

from __future__ import annotations

import time
from types import MappingProxyType
from typing import Iterable
from typing import Mapping
from typing import Optional

from mailbuilder.components.base import ContainerComponent, MailComponent, default_source
from mailbuilder.templates.source import TemplateSource
from mailbuilder.templates.types import PlaceholderMap
from mailbuilder.utils.logging import get_logger

logger = get_logger(__name__)


class MailBuilder(ContainerComponent):
    """Builds a complete HTML mail from its top-level components.

    Renders like any container, wrapped in the fixed ``structure``
    document template and without extra placeholders. This is the entry
    point application code calls; every other node is reached through
    the tree it owns.

    Example:
        >>> html = MailBuilder([TextComponent("hi")]).build()
    """

    template_id = "structure"

    def __init__(self, children: Iterable[MailComponent] = ()) -> None:
        self.children: list[MailComponent] = list(children)

    @property
    def extra_placeholders(self) -> Mapping[str, str]:  # type: ignore[override]
        """Always empty: the document template only receives ``{content}``."""
        return MappingProxyType({})

    def placeholders(self) -> PlaceholderMap:
        return {}

    def render(self, source: Optional[TemplateSource] = None) -> str:
        if source is None:
            source = default_source()
        start_time = time.perf_counter()
        logger.debug(f"Rendering mail with {len(self.children)} top-level components")

        html = super().render(source)

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            f"Rendered mail ({len(html)} characters) in {duration_ms:.2f}ms"
        )
        return html

    def build(self, source: Optional[TemplateSource] = None) -> str:
        """Render the whole document to its final HTML string."""
        return self.render(source)
