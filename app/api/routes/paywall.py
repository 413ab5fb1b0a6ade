"""
Paywall decision endpoint: /paywall?articleid=<id> with optional auth-sessionid header.
"""
from fastapi import APIRouter, Request, Response

from app.api.responses import ALL_METHODS, to_response
from app.paywall import (
    decide,
    extract_article_id,
    extract_session_id,
    record_decision,
    render_decision,
)
from app.paywall.config import get_paywall_path

router = APIRouter(tags=["paywall"])


# Prefix match: /paywall, /paywall/..., /paywall-anything all land here.
@router.api_route(get_paywall_path() + "{suffix:path}", methods=ALL_METHODS)
def paywall(request: Request) -> Response:
    """ALLOW/BLOCK in Paywall-Result, details in Paywall-Meta, both echoed in the body."""
    decision = decide(
        extract_article_id(request.query_params),
        extract_session_id(request.headers),
    )
    record_decision(decision)
    return to_response(render_decision(decision))
