"""Template types for mail rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

PlaceholderMap = Dict[str, str]


@dataclass
class EmailContent:
    """Container for email content."""

    subject: str
    body_text: str
    body_html: str
