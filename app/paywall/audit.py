"""
Аудит решений: record_decision вызывается из route-слоя после decide().
Только лог + метрика; само решение остаётся чистым.
"""
from __future__ import annotations

import logging

from app.paywall.models import PaywallDecision
from app.utils.metrics import article_requests_total, paywall_decisions_total

logger = logging.getLogger(__name__)


def record_decision(decision: PaywallDecision) -> None:
    """Записать событие решения paywall для аналитики."""
    paywall_decisions_total.labels(result=decision.result.value).inc()
    logger.info(
        "paywall_decision",
        extra={
            "article_id": decision.article_id,
            "session_id": decision.session_id,
            "decision": decision.result.value,
        },
    )


def record_article(article_id: str, locator: str) -> None:
    article_requests_total.inc()
    logger.info(
        "paywall_article_served",
        extra={"article_id": article_id, "paywall": locator},
    )
