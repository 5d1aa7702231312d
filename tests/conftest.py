import json

import pytest


class FakeResponse:
    def __init__(self, body, status_code=200):
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, headers=None, **kwargs):
        self.calls.append({"url": url, "headers": headers or {}})
        if self.error is not None:
            raise self.error
        return self.response


def article(title="Title", source="Source", url="https://example.com/a", author=None):
    return {
        "source": {"id": None, "name": source},
        "author": author,
        "title": title,
        "description": "desc",
        "url": url,
        "urlToImage": None,
        "publishedAt": "2024-05-01T12:00:00Z",
        "content": None,
    }


@pytest.fixture
def success_body():
    return {
        "status": "ok",
        "totalResults": 2,
        "articles": [
            article("First story", "Wire", "https://example.com/1", author="Jane Roe"),
            article("Second story", "Daily", "https://example.com/2"),
        ],
    }


@pytest.fixture
def error_body():
    return {
        "status": "error",
        "code": "apiKeyInvalid",
        "message": "Your API key is invalid or incorrect.",
    }


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv("NEWS_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
