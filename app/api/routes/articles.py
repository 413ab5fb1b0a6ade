"""
Content origin endpoint: /article/kittens is always paywalled.
"""
from fastapi import APIRouter, Request, Response

from app.api.responses import ALL_METHODS, to_response
from app.paywall import extract_article_request, record_article, request_origin, serve_article

ARTICLE_SLUG = "kittens"

router = APIRouter(tags=["content-origin"])


@router.api_route(f"/article/{ARTICLE_SLUG}", methods=ALL_METHODS)
def article_kittens(request: Request) -> Response:
    """Fixed HTML article plus a Paywall locator pointing back at this service."""
    article = extract_article_request(request.url.path)
    document = serve_article(request_origin(request.url))
    record_article(article.article_id, document.headers["Paywall"])
    return to_response(document)
