"""Template sources resolving fragment text by identifier."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping
from typing import Protocol
from typing import Union

from botocore.exceptions import ClientError

from mailbuilder.exceptions import TemplateNotFoundError
from mailbuilder.services.aws_clients import get_s3_client
from mailbuilder.templates.fragments import BUILTIN_TEMPLATES
from mailbuilder.utils.logging import get_logger

logger = get_logger(__name__)

_MISSING_OBJECT_CODES = frozenset({"NoSuchKey", "404", "NotFound"})


class TemplateSource(Protocol):
    """Protocol for anything that resolves template fragments."""

    def get_template(self, template_id: str) -> str: ...


class DictTemplateSource:
    """Template source backed by an in-memory mapping."""

    def __init__(self, templates: Mapping[str, str]) -> None:
        self._templates = dict(templates)

    def get_template(self, template_id: str) -> str:
        try:
            return self._templates[template_id]
        except KeyError:
            raise TemplateNotFoundError(template_id) from None

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates


def builtin_source() -> DictTemplateSource:
    """Return a source over the bundled HTML fragments."""
    return DictTemplateSource(BUILTIN_TEMPLATES)


class DirectoryTemplateSource:
    """Template source reading ``<directory>/<id><suffix>`` files.

    Identifiers that would escape the directory are treated as missing.
    File contents are cached per identifier after the first read.
    """

    def __init__(self, directory: Union[str, Path], suffix: str = ".html") -> None:
        self.directory = Path(directory)
        self.suffix = suffix
        self._cache: dict[str, str] = {}

    def get_template(self, template_id: str) -> str:
        if template_id in self._cache:
            return self._cache[template_id]

        if not _is_safe_identifier(template_id):
            raise TemplateNotFoundError(template_id)

        path = self.directory / f"{template_id}{self.suffix}"
        try:
            text = path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            raise TemplateNotFoundError(template_id) from None

        logger.debug(f"Loaded template {template_id} from {path}")
        self._cache[template_id] = text
        return text


class S3TemplateSource:
    """Template source reading fragments from an S3 bucket.

    Objects are looked up as ``<prefix><id><suffix>`` and cached per
    identifier. A missing object maps to ``TemplateNotFoundError``; any
    other client error propagates.
    """

    def __init__(
        self,
        bucket: str,
        prefix: str = "templates/",
        suffix: str = ".html",
        region_name: str | None = None,
    ) -> None:
        self.bucket = bucket
        self.prefix = prefix
        self.suffix = suffix
        self.region_name = region_name
        self._cache: dict[str, str] = {}

    def object_key(self, template_id: str) -> str:
        return f"{self.prefix}{template_id}{self.suffix}"

    def get_template(self, template_id: str) -> str:
        if template_id in self._cache:
            return self._cache[template_id]

        if not _is_safe_identifier(template_id):
            raise TemplateNotFoundError(template_id)

        key = self.object_key(template_id)
        client = get_s3_client(region_name=self.region_name)
        try:
            response = client.get_object(Bucket=self.bucket, Key=key)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            if code in _MISSING_OBJECT_CODES:
                raise TemplateNotFoundError(template_id) from None
            raise

        text = response["Body"].read().decode("utf-8")
        logger.debug(f"Loaded template {template_id} from s3://{self.bucket}/{key}")
        self._cache[template_id] = text
        return text


class ChainTemplateSource:
    """Template source trying several sources in order; first hit wins."""

    def __init__(self, *sources: TemplateSource) -> None:
        self.sources = list(sources)

    def get_template(self, template_id: str) -> str:
        for source in self.sources:
            try:
                return source.get_template(template_id)
            except TemplateNotFoundError:
                continue
        raise TemplateNotFoundError(template_id)


def _is_safe_identifier(template_id: str) -> bool:
    if not template_id or template_id in {".", ".."}:
        return False
    return "/" not in template_id and "\\" not in template_id
