"""Resource fetching: http(s) via httpx, opt-in local files via pathlib."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

import httpx

from svguri.config import settings

logger = logging.getLogger(__name__)


class SvgFetchError(RuntimeError):
    """Raised when an SVG resource cannot be retrieved."""


def resolve_source(source: str | Path | dict | None) -> str | None:
    """Reduce a resource locator to a URI string.

    Accepts a URI, a filesystem path, or a ``{"uri": ...}`` mapping.
    """
    if source is None:
        return None
    if isinstance(source, dict):
        source = source.get("uri")
        if source is None:
            return None
    if isinstance(source, Path):
        return source.resolve().as_uri()
    return str(source)


async def fetch_svg_text(
    uri: str,
    client: httpx.AsyncClient | None = None,
    *,
    allow_local: bool = False,
) -> str:
    """Fetch the SVG document at ``uri`` as text.

    Local files (``file://`` URIs and bare paths) are only read when
    ``allow_local`` is set.
    """
    scheme = urlparse(uri).scheme.lower()
    if scheme in ("http", "https"):
        return await _fetch_http(uri, client)
    if scheme == "file":
        path = Path(unquote(urlparse(uri).path))
    elif not scheme or len(scheme) == 1:
        # bare path, or a Windows drive letter
        path = Path(uri)
    else:
        raise SvgFetchError(f"Unsupported URI scheme: {scheme!r}")
    if not allow_local:
        raise SvgFetchError(f"Local file access is disabled: {uri}")
    return await _read_file(path)


async def _fetch_http(uri: str, client: httpx.AsyncClient | None) -> str:
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=settings.fetch_timeout_s, follow_redirects=True)
    limit = settings.max_document_bytes
    chunks: list[bytes] = []
    size = 0
    try:
        async with client.stream("GET", uri) as response:
            response.raise_for_status()
            async for chunk in response.aiter_bytes():
                size += len(chunk)
                if size > limit:
                    raise SvgFetchError(f"{uri} exceeds {limit} bytes")
                chunks.append(chunk)
            encoding = response.encoding or "utf-8"
    except httpx.HTTPError as e:
        raise SvgFetchError(f"Fetching {uri} failed: {e}") from e
    finally:
        if owns_client:
            await client.aclose()

    logger.info("Fetched %s (%d bytes)", uri, size)
    return b"".join(chunks).decode(encoding, errors="replace")


async def _read_file(path: Path) -> str:
    try:
        size = path.stat().st_size
        if size > settings.max_document_bytes:
            raise SvgFetchError(f"{path} exceeds {settings.max_document_bytes} bytes")
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SvgFetchError(f"Reading {path} failed: {e}") from e
