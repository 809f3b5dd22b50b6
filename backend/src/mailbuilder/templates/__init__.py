"""Template fragments, sources and placeholder substitution."""

from mailbuilder.templates.fragments import BUILTIN_TEMPLATES
from mailbuilder.templates.source import (
    ChainTemplateSource,
    DictTemplateSource,
    DirectoryTemplateSource,
    S3TemplateSource,
    TemplateSource,
    builtin_source,
)
from mailbuilder.templates.substitution import placeholder, substitute
from mailbuilder.templates.types import EmailContent, PlaceholderMap

__all__ = [
    "BUILTIN_TEMPLATES",
    "ChainTemplateSource",
    "DictTemplateSource",
    "DirectoryTemplateSource",
    "EmailContent",
    "PlaceholderMap",
    "S3TemplateSource",
    "TemplateSource",
    "builtin_source",
    "placeholder",
    "substitute",
]
