"""
Content origin: serve_article(request_origin) -> OriginDocument.
Статья всегда под paywall: локатор отдаётся в заголовке Paywall и дублируется в теле.
"""
from __future__ import annotations

from urllib.parse import urlencode

from app.paywall.config import ARTICLE_ID_PARAM, get_paywall_article_id, get_paywall_path
from app.paywall.models import TEXT_HTML, OriginDocument

ARTICLE_TEMPLATE = """<!doctype html>
<html>
  <head><title>Kittens</title></head>
  <body>
    <h1>Cute premium kittens 🐱</h1>
    <p>This article is paywalled.</p>
    <p>paywall: {locator}</p>
  </body>
</html>
"""


def build_paywall_locator(request_origin: str) -> str:
    """Absolute URL of the decision endpoint for the paywalled article."""
    query = urlencode({ARTICLE_ID_PARAM: get_paywall_article_id()})
    return f"{request_origin}{get_paywall_path()}?{query}"


def serve_article(request_origin: str) -> OriginDocument:
    """
    Render the paywalled article.

    Consumers look for the "paywall: <locator>" line in the body as well as
    the Paywall header, so both carry the same string.
    """
    locator = build_paywall_locator(request_origin)
    return OriginDocument(
        status_code=200,
        media_type=TEXT_HTML,
        headers={"Paywall": locator},
        body=ARTICLE_TEMPLATE.format(locator=locator),
    )
