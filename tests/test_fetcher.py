import pytest
import requests

from news_fetcher.exceptions import InvalidRequestError, ParseError, TransportError
from news_fetcher.fetcher import BASE_URL, USER_AGENT, build_url, fetch_json

from conftest import FakeResponse, FakeSession


def test_search_url_keeps_parameter_order():
    url = build_url("everything", {"q": "rust", "sortBy": "popularity", "apiKey": "k"})
    assert url == f"{BASE_URL}/everything?q=rust&sortBy=popularity&apiKey=k"


def test_query_text_is_encoded():
    url = build_url("everything", {"q": "rust&apiKey=evil lang", "sortBy": "popularity", "apiKey": "k"})
    assert "q=rust%26apiKey%3Devil+lang&sortBy=popularity&apiKey=k" in url
    assert url.count("apiKey=") == 1


def test_fetch_json_sends_user_agent():
    session = FakeSession(FakeResponse({"status": "ok", "articles": []}))
    body = fetch_json("top-headlines", {"country": "us", "apiKey": "k"}, session=session)

    assert body == {"status": "ok", "articles": []}
    assert len(session.calls) == 1
    assert session.calls[0]["headers"]["User-Agent"] == USER_AGENT
    assert session.calls[0]["url"].endswith("/top-headlines?country=us&apiKey=k")


def test_error_status_body_is_still_decoded(error_body):
    session = FakeSession(FakeResponse(error_body, status_code=401))
    assert fetch_json("everything", {"q": "x"}, session=session) == error_body


def test_connection_failure_is_transport_error():
    session = FakeSession(error=requests.ConnectionError("refused"))
    with pytest.raises(TransportError):
        fetch_json("everything", {"q": "x"}, session=session)


def test_invalid_json_is_parse_error():
    session = FakeSession(FakeResponse("<html>502 Bad Gateway</html>", status_code=502))
    with pytest.raises(ParseError):
        fetch_json("everything", {"q": "x"}, session=session)


def test_unencodable_query_is_invalid_request():
    session = FakeSession(FakeResponse({"status": "ok", "articles": []}))
    with pytest.raises(InvalidRequestError):
        fetch_json("everything", {"q": "caf\udce9", "apiKey": "k"}, session=session)
    assert session.calls == []
