"""Core component model: leaf and container nodes.

Every node renders itself by resolving its fragment from a template
source and substituting its placeholder map into it. Containers first
render their children in order and use the concatenated output as their
own ``{content}`` value.

Rendering reads the node's attributes at call time and never writes to
them, so the same tree can be rendered repeatedly and from several
threads as long as nobody mutates it meanwhile. Trees must be acyclic;
a node that contains itself recurses until the interpreter's recursion
limit is hit.
"""

from __future__ import annotations

from typing import ClassVar
from typing import Iterable
from typing import Iterator
from typing import Mapping
from typing import Optional
from typing import Protocol

from mailbuilder.exceptions import ValidationError
from mailbuilder.templates.source import TemplateSource, builtin_source
from mailbuilder.templates.substitution import substitute
from mailbuilder.templates.types import PlaceholderMap

CONTENT_PLACEHOLDER = "content"

_DEFAULT_SOURCE: Optional[TemplateSource] = None


def default_source() -> TemplateSource:
    """Return the shared source over the bundled fragments."""
    global _DEFAULT_SOURCE
    if _DEFAULT_SOURCE is None:
        _DEFAULT_SOURCE = builtin_source()
    return _DEFAULT_SOURCE


class MailComponent(Protocol):
    """Protocol every node of a mail tree implements."""

    def render(self, source: Optional[TemplateSource] = None) -> str: ...


def _resolve_template_id(component: object, template_id: Optional[str]) -> str:
    resolved = template_id or getattr(type(component), "template_id", "")
    if not resolved:
        raise ValidationError("template id must not be empty", field="template_id")
    return resolved


class LeafComponent:
    """Node holding a single content value and a fixed template.

    Concrete kinds set ``template_id`` on the class and override
    ``placeholders()`` to supply their extra markers. Ad-hoc leaves can
    pass both to the constructor instead.
    """

    template_id: ClassVar[str] = ""

    def __init__(
        self,
        content: str,
        template_id: Optional[str] = None,
        placeholders: Optional[Mapping[str, str]] = None,
    ) -> None:
        if content is None:
            raise ValidationError("content must not be None", field="content")
        self.template_id = _resolve_template_id(self, template_id)  # type: ignore[misc]
        self.content = content
        self.extra_placeholders: PlaceholderMap = dict(placeholders or {})

    def placeholders(self) -> PlaceholderMap:
        """Kind-specific placeholder values, built from current attributes."""
        return dict(self.extra_placeholders)

    def render(self, source: Optional[TemplateSource] = None) -> str:
        if source is None:
            source = default_source()
        fragment = source.get_template(self.template_id)
        values = self.placeholders()
        values[CONTENT_PLACEHOLDER] = self.content
        return substitute(fragment, values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(template_id={self.template_id!r}, content={self.content!r})"


class ContainerComponent:
    """Node owning an ordered list of child components.

    Children render in list order and their outputs are concatenated
    without separators into the container's ``{content}`` marker.
    """

    template_id: ClassVar[str] = ""

    def __init__(
        self,
        children: Iterable[MailComponent] = (),
        template_id: Optional[str] = None,
        placeholders: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.template_id = _resolve_template_id(self, template_id)  # type: ignore[misc]
        self.children: list[MailComponent] = list(children)
        self.extra_placeholders: PlaceholderMap = dict(placeholders or {})

    def add(self, component: MailComponent) -> ContainerComponent:
        """Append a child and return the container for chaining."""
        self.children.append(component)
        return self

    def extend(self, components: Iterable[MailComponent]) -> ContainerComponent:
        self.children.extend(components)
        return self

    def __iter__(self) -> Iterator[MailComponent]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def placeholders(self) -> PlaceholderMap:
        """Kind-specific placeholder values, built from current attributes."""
        return dict(self.extra_placeholders)

    def render_children(self, source: TemplateSource) -> str:
        return "".join(child.render(source) for child in self.children)

    def render(self, source: Optional[TemplateSource] = None) -> str:
        if source is None:
            source = default_source()
        fragment = source.get_template(self.template_id)
        values = self.placeholders()
        values[CONTENT_PLACEHOLDER] = self.render_children(source)
        return substitute(fragment, values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(template_id={self.template_id!r}, children={len(self.children)})"
