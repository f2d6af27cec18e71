"""
Tests for the Gemini service module.
"""

import pytest
from google.genai import types

from article_machine.core.gemini_service import GeminiService
from article_machine.models.schemas import (
    ArticleConfig,
    ArticleLength,
    ArticleType,
    GeneratedArticle,
    Video,
)
from article_machine.utils.error_handling import (
    ArticleParseError,
    ConfigurationError,
    ARTICLE_PARSE_ERROR_MESSAGE,
    TRANSCRIPTION_ERROR_SENTINEL,
)


def test_init_requires_api_key(monkeypatch):
    """Test that a missing API key is rejected."""
    monkeypatch.setattr("article_machine.core.gemini_service.config.GEMINI_API_KEY", None)
    with pytest.raises(ConfigurationError):
        GeminiService()


def test_init_with_explicit_key(mock_genai_client):
    service = GeminiService(api_key="explicit_key", model="gemini-test")
    assert service.api_key == "explicit_key"
    assert service.model == "gemini-test"


def test_search_videos(mock_genai_client, video_payload, json_text):
    """Test that search results are parsed into videos."""
    mock_genai_client.respond(json_text([video_payload, dict(video_payload, id="vid002")]))

    service = GeminiService(api_key="test_api_key")
    videos = service.search_videos("espetinho de carne")

    assert [v.id for v in videos] == ["vid001", "vid002"]
    assert all(isinstance(v, Video) for v in videos)
    assert videos[0].transcription is None

    kwargs = mock_genai_client.models.generate_content.call_args.kwargs
    assert '"espetinho de carne"' in kwargs["contents"]
    assert kwargs["config"].response_mime_type == "application/json"
    assert kwargs["config"].response_schema.type == types.Type.ARRAY
    assert set(kwargs["config"].response_schema.items.required) == set(video_payload)


def test_search_videos_malformed_json(mock_genai_client):
    """Test that malformed JSON yields an empty result list."""
    mock_genai_client.respond("[{not json")

    service = GeminiService(api_key="test_api_key")
    assert service.search_videos("picanha") == []


def test_search_videos_wrong_shape(mock_genai_client, json_text):
    """Test that JSON of the wrong shape also yields an empty list."""
    mock_genai_client.respond(json_text({"videos": []}))

    service = GeminiService(api_key="test_api_key")
    assert service.search_videos("picanha") == []


def test_search_videos_propagates_api_errors(mock_genai_client):
    mock_genai_client.models.generate_content.side_effect = RuntimeError("quota exceeded")

    service = GeminiService(api_key="test_api_key")
    with pytest.raises(RuntimeError):
        service.search_videos("picanha")


def test_generate_transcription(mock_genai_client, videos):
    mock_genai_client.respond("Fala, pessoal! Hoje vamos fazer espetinho.")

    service = GeminiService(api_key="test_api_key")
    transcription = service.generate_transcription(videos[0])

    assert transcription == "Fala, pessoal! Hoje vamos fazer espetinho."
    kwargs = mock_genai_client.models.generate_content.call_args.kwargs
    assert videos[0].title in kwargs["contents"]
    assert videos[0].channel in kwargs["contents"]
    assert kwargs["config"] is None


def test_generate_transcription_empty_response(mock_genai_client, videos):
    """Test that an empty response returns the fixed failure sentinel."""
    mock_genai_client.respond(None)

    service = GeminiService(api_key="test_api_key")
    assert service.generate_transcription(videos[0]) == TRANSCRIPTION_ERROR_SENTINEL


def test_generate_article(mock_genai_client, transcribed_video, article_payload, json_text):
    mock_genai_client.respond(json_text(article_payload))

    service = GeminiService(api_key="test_api_key")
    article = service.generate_article(transcribed_video, ArticleConfig())

    assert isinstance(article, GeneratedArticle)
    assert article.title == article_payload["title"]
    assert article.seo_score == 92
    assert article.keyword_density == "1.8%"

    kwargs = mock_genai_client.models.generate_content.call_args.kwargs
    assert kwargs["config"].response_schema.type == types.Type.OBJECT
    assert len(kwargs["config"].response_schema.required) == 10


def test_generate_article_malformed_json(mock_genai_client, transcribed_video):
    """Test that malformed JSON raises the fixed article error."""
    mock_genai_client.respond("{\"title\": ")

    service = GeminiService(api_key="test_api_key")
    with pytest.raises(ArticleParseError) as excinfo:
        service.generate_article(transcribed_video, ArticleConfig())

    assert str(excinfo.value) == ARTICLE_PARSE_ERROR_MESSAGE


def test_article_prompt(mock_genai_client, transcribed_video):
    """Test that the article prompt carries the content options."""
    article_config = ArticleConfig(
        type=ArticleType.TUTORIAL,
        keywords=["picanha", "churrasco"],
        length=ArticleLength.SHORT,
        include_faq=False,
        include_equipment=True,
    )

    service = GeminiService(api_key="test_api_key")
    prompt = service.build_article_prompt(transcribed_video, article_config)

    assert '"tutorial"' in prompt
    assert "picanha, churrasco" in prompt
    assert "aproximadamente 1000 palavras" in prompt
    assert "FAQ (false)" in prompt
    assert "Equipamentos (true)" in prompt
    assert transcribed_video.transcription in prompt


@pytest.mark.parametrize("length, words", [
    (ArticleLength.SHORT, 1000),
    (ArticleLength.MEDIUM, 1800),
    (ArticleLength.LONG, 2500),
    (ArticleLength.DETAILED, 2500),
])
def test_target_words(length, words):
    assert length.target_words == words
