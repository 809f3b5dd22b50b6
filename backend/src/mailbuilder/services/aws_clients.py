"""Shared boto3 client factory with caching."""

from __future__ import annotations

import os
from typing import Any

import boto3

_CLIENT_CACHE: dict[tuple[str, str | None], Any] = {}


def get_client(service: str, region_name: str | None = None) -> Any:
    """Return a cached boto3 client for the given service."""
    region = region_name or os.getenv("AWS_REGION") or None
    cache_key = (service, region)
    if cache_key in _CLIENT_CACHE:
        return _CLIENT_CACHE[cache_key]
    client = boto3.client(  # type: ignore[call-overload]
        service,
        region_name=region,
    )
    _CLIENT_CACHE[cache_key] = client
    return client


def clear_client_cache() -> None:
    """Clear cached boto3 clients (useful in tests)."""
    _CLIENT_CACHE.clear()


def get_ses_client(region_name: str | None = None) -> Any:
    return get_client("ses", region_name=region_name)


def get_s3_client(region_name: str | None = None) -> Any:
    return get_client("s3", region_name=region_name)
