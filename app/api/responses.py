"""
Adapter between the paywall simulators and Starlette responses.
"""
from fastapi import Response
from fastapi.responses import PlainTextResponse

from app.paywall.models import OriginDocument

# The original edge worker dispatches on path only, whatever the method.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def to_response(document: OriginDocument) -> Response:
    """
    Render an OriginDocument.

    Header values are written as UTF-8 bytes, the same encoding as the body,
    so a value echoed in both (Paywall-Meta, Paywall) is byte-identical.
    """
    response = Response(
        content=document.body,
        status_code=document.status_code,
        media_type=document.media_type,
    )
    response.raw_headers.extend(
        (name.lower().encode("latin-1"), value.encode("utf-8"))
        for name, value in document.headers.items()
    )
    return response


def not_found() -> PlainTextResponse:
    return PlainTextResponse("not found\n", status_code=404)
