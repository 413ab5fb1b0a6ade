"""
Симулятор двух upstream-сервисов за edge-слоем (внутренняя библиотека).
Content origin (serve_article) и paywall origin (decide) независимы; контракт через URL/заголовки.
"""
from app.paywall.audit import record_article, record_decision
from app.paywall.decision import decide, is_anonymous, is_premium, render_decision
from app.paywall.extract import (
    extract_article_id,
    extract_article_request,
    extract_session_id,
    request_origin,
)
from app.paywall.models import (
    ArticleRequest,
    OriginDocument,
    PaywallDecision,
    PaywallResult,
)
from app.paywall.origin import build_paywall_locator, serve_article

__all__ = [
    "ArticleRequest",
    "OriginDocument",
    "PaywallDecision",
    "PaywallResult",
    "build_paywall_locator",
    "decide",
    "extract_article_id",
    "extract_article_request",
    "extract_session_id",
    "is_anonymous",
    "is_premium",
    "record_article",
    "record_decision",
    "render_decision",
    "request_origin",
    "serve_article",
]
