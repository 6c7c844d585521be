import pytest
from fastapi.testclient import TestClient

from newsletter_titles.client import GENERATE_PATH, TitleClient
from newsletter_titles.errors import GENERIC_FAILURE, QUOTA_MESSAGE, QuotaExceededError, TitleGenerationError


class FakeResponse:
    def __init__(self, status_code, body=None, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if self._body is None:
            raise ValueError("no json")
        return self._body


class FakeHttp:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def post(self, url, json=None, headers=None):
        self.calls.append((url, json, headers))
        return self.response


def test_returns_titles_and_posts_context():
    http = FakeHttp(FakeResponse(200, {"titles": ["A", "B"]}))
    client = TitleClient("http://svc/", access_token="tok", http=http)

    assert client.generate_titles("cats") == ["A", "B"]

    url, body, headers = http.calls[0]
    assert url == "http://svc" + GENERATE_PATH
    assert body == {"context": "cats"}
    assert headers["Authorization"] == "Bearer tok"


def test_no_token_no_authorization_header():
    http = FakeHttp(FakeResponse(200, {"titles": []}))
    TitleClient("http://svc", http=http).generate_titles("x")
    assert "Authorization" not in http.calls[0][2]


def test_402_raises_quota_error():
    http = FakeHttp(FakeResponse(402, {"error": QUOTA_MESSAGE}))
    with pytest.raises(QuotaExceededError) as info:
        TitleClient(http=http).generate_titles("x")
    assert info.value.message == QUOTA_MESSAGE


def test_quota_message_on_other_status_is_still_quota():
    http = FakeHttp(FakeResponse(500, {"error": "OpenAI API quota exceeded. Try later."}))
    with pytest.raises(QuotaExceededError):
        TitleClient(http=http).generate_titles("x")


def test_server_error_message_is_surfaced():
    http = FakeHttp(FakeResponse(500, {"error": "OpenAI API key not configured"}))
    with pytest.raises(TitleGenerationError) as info:
        TitleClient(http=http).generate_titles("x")
    assert not isinstance(info.value, QuotaExceededError)
    assert info.value.message == "OpenAI API key not configured"
    assert info.value.status_code == 500


def test_non_json_error_falls_back_to_body_text():
    http = FakeHttp(FakeResponse(503, text="Service Unavailable"))
    with pytest.raises(TitleGenerationError, match="Service Unavailable"):
        TitleClient(http=http).generate_titles("x")


def test_against_the_service(api, fake_openai):
    client = TitleClient("http://testserver", access_token="tok", http=api)
    assert client.generate_titles("cats") == ["Foo", "Bar", "Baz"]

    fake_openai.reply(429, {"error": {"type": "insufficient_quota"}})
    with pytest.raises(QuotaExceededError):
        client.generate_titles("cats")


@pytest.mark.parametrize("response", [FakeResponse(200, {}), FakeResponse(200, text="<html>")])
def test_200_without_titles_is_a_generic_failure(response):
    with pytest.raises(TitleGenerationError) as info:
        TitleClient(http=FakeHttp(response)).generate_titles("x")
    assert info.value.message == GENERIC_FAILURE


def test_error_status_defaults_and_overrides():
    assert TitleGenerationError("x").status_code == 500
    assert TitleGenerationError("x", 503).status_code == 503
    assert QuotaExceededError().status_code == 402
    assert QuotaExceededError("x", None).status_code == 402
