"""
DTO paywall: ArticleRequest, PaywallDecision (+ PaywallResult), OriginDocument.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from app.paywall.config import DEFAULT_ARTICLE_ID

TEXT_PLAIN = "text/plain; charset=utf-8"
TEXT_HTML = "text/html; charset=utf-8"


class PaywallResult(str, Enum):
    ALLOW = "ALLOW"
    BLOCK = "BLOCK"


# ----- Вход content origin -----


class ArticleRequest(BaseModel):
    """Article requested from the content origin."""

    article_id: str = DEFAULT_ARTICLE_ID

    model_config = {"frozen": True}


# ----- Решение доступа (чистая логика, без I/O) -----


class PaywallDecision(BaseModel):
    """Result of decide(): the decision plus the inputs it was made on, verbatim."""

    result: PaywallResult
    article_id: str = Field(..., description="articleid query parameter as received")
    session_id: str = Field(..., description="auth-sessionid header as received, or 'anon'")

    model_config = {"frozen": True}

    @property
    def meta(self) -> str:
        return ";".join(
            [
                f"article={self.article_id}",
                f"session={self.session_id}",
                f"decision={self.result.value}",
            ]
        )

    def headers(self) -> dict[str, str]:
        return {
            "Paywall-Result": self.result.value,
            "Paywall-Meta": self.meta,
        }

    def body(self) -> str:
        # Header and body are built from the same values, never separately.
        headers = self.headers()
        return (
            f"paywall-result: {headers['Paywall-Result']}\n"
            f"paywall-meta: {headers['Paywall-Meta']}\n"
        )


# ----- Ответ симулятора (route layer turns it into an HTTP response) -----


class OriginDocument(BaseModel):
    """Rendered origin response: status, content type, extra headers and body."""

    status_code: int = 200
    media_type: str = TEXT_PLAIN
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""

    model_config = {"frozen": True}
