"""
Tests for the frontend API client.
"""

import pytest
import requests
from unittest.mock import patch, MagicMock

from article_machine.frontend.api_client import ApiClient
from article_machine.models.schemas import ArticleConfig, GeneratedArticle


def _response(payload, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


@pytest.fixture
def api_client():
    return ApiClient("http://testserver", timeout=5)


def test_urls(api_client):
    assert api_client._url("videos/search") == "http://testserver/api/v1/videos/search"


@patch("article_machine.frontend.api_client.requests.post")
def test_search_videos(mock_post, api_client, video_payload):
    mock_post.return_value = _response([video_payload])

    videos = api_client.search_videos("espetinho")

    assert videos[0].title == video_payload["title"]
    mock_post.assert_called_once_with(
        "http://testserver/api/v1/videos/search", json={"query": "espetinho"}, timeout=5
    )


@patch("article_machine.frontend.api_client.requests.post")
def test_generate_transcription(mock_post, api_client, videos):
    mock_post.return_value = _response({"video_id": "vid001", "transcription": "Fala!"})

    assert api_client.generate_transcription(videos[0]) == "Fala!"
    assert mock_post.call_args.kwargs["json"]["video"]["id"] == "vid001"


@patch("article_machine.frontend.api_client.requests.post")
def test_generate_article_sends_aliases(mock_post, api_client, transcribed_video, article_payload):
    mock_post.return_value = _response(article_payload)

    article = api_client.generate_article(transcribed_video, ArticleConfig(include_equipment=True))

    assert isinstance(article, GeneratedArticle)
    assert article.word_count == 1800
    sent_config = mock_post.call_args.kwargs["json"]["config"]
    assert sent_config["includeEquipment"] is True
    assert sent_config["type"] == "guide"
    assert sent_config["length"] == "medium"


@patch("article_machine.frontend.api_client.requests.post")
def test_http_errors_raise(mock_post, api_client, transcribed_video):
    mock_post.return_value = _response({"detail": "Erro"}, status_code=502)

    with pytest.raises(requests.HTTPError):
        api_client.generate_article(transcribed_video, ArticleConfig())


@patch("article_machine.frontend.api_client.requests.get")
def test_health(mock_get, api_client):
    mock_get.return_value = _response({"status": "ok", "api_key_configured": True, "model": "gemini-test"})

    status = api_client.health()

    assert status["api_key_configured"] is True
    mock_get.assert_called_once_with("http://testserver/api/v1/health", timeout=5)
