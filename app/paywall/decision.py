"""
Decision только: decide(article_id, session_id) -> PaywallDecision.
Чистая функция, без I/O. Premium статья + анонимная сессия -> BLOCK, всё остальное -> ALLOW.
"""
from __future__ import annotations

from app.paywall.config import ANONYMOUS_SESSION, PREMIUM_PREFIX
from app.paywall.models import TEXT_PLAIN, OriginDocument, PaywallDecision, PaywallResult


def is_premium(article_id: str) -> bool:
    return article_id.lower().startswith(PREMIUM_PREFIX)


def is_anonymous(session_id: str) -> bool:
    # A caller-supplied "anon" is indistinguishable from the missing-header default.
    return not session_id or session_id == ANONYMOUS_SESSION


def decide(article_id: str, session_id: str) -> PaywallDecision:
    """
    Classify the article and the session and decide access.

    - non-premium article -> ALLOW, whatever the session
    - premium article, session empty or "anon" -> BLOCK
    - premium article, any other session -> ALLOW (presence alone suffices)

    Inputs are kept verbatim; extraction defaults are applied by the caller.
    """
    if is_premium(article_id) and is_anonymous(session_id):
        result = PaywallResult.BLOCK
    else:
        result = PaywallResult.ALLOW
    return PaywallDecision(result=result, article_id=article_id, session_id=session_id)


def render_decision(decision: PaywallDecision) -> OriginDocument:
    """Paywall-Result / Paywall-Meta headers plus the two-line text body."""
    return OriginDocument(
        status_code=200,
        media_type=TEXT_PLAIN,
        headers=decision.headers(),
        body=decision.body(),
    )
