"""
Paywall config — typed wrapper over app.core.config for the locator contract.
"""
from __future__ import annotations

from app.core.config import settings

ARTICLE_ID_PARAM = "articleid"
SESSION_HEADER = "auth-sessionid"

DEFAULT_ARTICLE_ID = "unknown"
ANONYMOUS_SESSION = "anon"
PREMIUM_PREFIX = "premium"


def get_paywall_article_id() -> str:
    return getattr(settings, "paywall_article_id", "premium-kittens")


def get_paywall_path() -> str:
    return getattr(settings, "paywall_path", "/paywall")
