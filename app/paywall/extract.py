"""
Typed extraction of the paywall inputs from an inbound request.
Missing and empty values both fall back to the documented defaults; nothing here raises.
"""
from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlsplit

from app.paywall.config import (
    ANONYMOUS_SESSION,
    ARTICLE_ID_PARAM,
    DEFAULT_ARTICLE_ID,
    SESSION_HEADER,
)
from app.paywall.models import ArticleRequest


def extract_article_id(query_params: Mapping[str, str]) -> str:
    """First `articleid` query parameter, or "unknown" when missing or empty."""
    getlist = getattr(query_params, "getlist", None)
    if getlist is not None:
        values = getlist(ARTICLE_ID_PARAM)
        value = values[0] if values else None
    else:
        value = query_params.get(ARTICLE_ID_PARAM)
    return value or DEFAULT_ARTICLE_ID


def extract_session_id(headers: Mapping[str, str]) -> str:
    """`auth-sessionid` header, or "anon" when missing or empty."""
    value = headers.get(SESSION_HEADER)
    if not value:
        return ANONYMOUS_SESSION
    # Starlette decodes header bytes as latin-1; recover UTF-8 tokens when the bytes are UTF-8.
    try:
        return value.encode("latin-1").decode("utf-8")
    except UnicodeError:
        return value


def extract_article_request(path: str) -> ArticleRequest:
    """Article id is the last path segment, e.g. /article/kittens -> "kittens"."""
    slug = path.rstrip("/").rpartition("/")[2]
    return ArticleRequest(article_id=slug or DEFAULT_ARTICLE_ID)


def request_origin(url: object) -> str:
    """scheme://host[:port] of the inbound URL (userinfo, path and query dropped)."""
    parts = urlsplit(str(url))
    host = parts.netloc.rpartition("@")[2]
    return f"{parts.scheme}://{host}"
