"""Tests for request extraction: missing vs empty vs present."""
from starlette.datastructures import Headers, QueryParams, URL

from app.paywall.extract import (
    extract_article_id,
    extract_article_request,
    extract_session_id,
    request_origin,
)


def test_article_id_present():
    assert extract_article_id(QueryParams("articleid=premium-kittens")) == "premium-kittens"


def test_article_id_missing_or_empty():
    assert extract_article_id(QueryParams("")) == "unknown"
    assert extract_article_id(QueryParams("articleid=")) == "unknown"
    assert extract_article_id({}) == "unknown"


def test_article_id_malformed_query():
    assert extract_article_id(QueryParams("&&=;%zz")) == "unknown"


def test_article_request_from_path():
    assert extract_article_request("/article/kittens").article_id == "kittens"
    assert extract_article_request("/article/kittens/").article_id == "kittens"
    assert extract_article_request("/").article_id == "unknown"


def test_article_id_first_value_wins():
    params = QueryParams("articleid=free-article&articleid=premium-kittens")
    assert extract_article_id(params) == "free-article"
    assert extract_article_id(QueryParams("articleid=&articleid=premium-kittens")) == "unknown"


def test_session_id_present():
    assert extract_session_id(Headers({"auth-sessionid": "user-42"})) == "user-42"


def test_session_id_header_case_insensitive():
    assert extract_session_id(Headers({"Auth-SessionId": "user-42"})) == "user-42"


def test_session_id_utf8_bytes_recovered():
    # "käse" sent as UTF-8 arrives latin-1 decoded
    assert extract_session_id(Headers(raw=[(b"auth-sessionid", "käse".encode("utf-8"))])) == "käse"
    assert extract_session_id({"auth-sessionid": "käse"}) == "käse"
    assert extract_session_id({"auth-sessionid": "✓"}) == "✓"


def test_session_id_missing_or_empty():
    assert extract_session_id(Headers({})) == "anon"
    assert extract_session_id({"auth-sessionid": ""}) == "anon"


def test_request_origin():
    assert request_origin(URL("http://svc/article/kittens?x=1")) == "http://svc"
    assert request_origin("https://edge.example.com:8443/a") == "https://edge.example.com:8443"
    assert request_origin("http://user:pw@svc/article/kittens") == "http://svc"
