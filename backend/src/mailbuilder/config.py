"""Environment-driven configuration.

Settings are read from environment variables when requested, never at
import time, so tests can patch the environment freely.
"""

from __future__ import annotations

import os
from typing import Optional

from mailbuilder.exceptions import ConfigurationError
from mailbuilder.templates.source import (
    ChainTemplateSource,
    DirectoryTemplateSource,
    S3TemplateSource,
    TemplateSource,
    builtin_source,
)

DEFAULT_TEMPLATES_PREFIX = "templates/"


def require_env(name: str) -> str:
    """Return a required environment variable value."""
    value = os.getenv(name)
    if not value:
        raise ConfigurationError(name)
    return value


def get_sender_email() -> str:
    """Sender address for outgoing mail (SES_SENDER_EMAIL)."""
    return require_env("SES_SENDER_EMAIL")


def get_templates_dir() -> Optional[str]:
    return os.getenv("MAIL_TEMPLATES_DIR") or None


def get_templates_bucket() -> Optional[str]:
    return os.getenv("MAIL_TEMPLATES_BUCKET") or None


def get_templates_prefix() -> str:
    return os.getenv("MAIL_TEMPLATES_PREFIX", DEFAULT_TEMPLATES_PREFIX)


def get_template_source(templates_dir: Optional[str] = None) -> TemplateSource:
    """Assemble the template source for the current environment.

    Overrides are consulted before the bundled fragments: S3 first (when
    MAIL_TEMPLATES_BUCKET is set), then the directory (the argument or
    MAIL_TEMPLATES_DIR), then the built-ins.
    """
    sources: list[TemplateSource] = []

    bucket = get_templates_bucket()
    if bucket:
        sources.append(S3TemplateSource(bucket, prefix=get_templates_prefix()))

    directory = templates_dir or get_templates_dir()
    if directory:
        sources.append(DirectoryTemplateSource(directory))

    if not sources:
        return builtin_source()

    sources.append(builtin_source())
    return ChainTemplateSource(*sources)
