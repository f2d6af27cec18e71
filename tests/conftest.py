"""
Configuration for pytest tests.
"""

import json
import os
import pytest
from unittest.mock import patch, MagicMock

os.environ.setdefault("GEMINI_API_KEY", "test_api_key")
os.environ["ENVIRONMENT"] = "development"

from article_machine.models.schemas import ArticleConfig, GeneratedArticle, Video


@pytest.fixture
def video_payload():
    """Raw video record as returned by the model."""
    return {
        "id": "vid001",
        "title": "Espetinho de Carne Perfeito",
        "channel": "Churrasco Raiz",
        "duration": "12:34",
        "thumbnail": "https://picsum.photos/seed/vid001/640/360",
        "views": "1,2 mi",
        "published": "há 2 semanas",
    }


@pytest.fixture
def videos(video_payload):
    """Two videos, as returned by a search."""
    second = dict(video_payload, id="vid002", title="Espetinho de Frango na Brasa")
    return [Video(**video_payload), Video(**second)]


@pytest.fixture
def transcribed_video(videos):
    return videos[0].model_copy(update={"transcription": "Fala, pessoal! Hoje vamos fazer espetinho."})


@pytest.fixture
def article_payload():
    """Raw article record as returned by the model."""
    return {
        "title": "Como Fazer Espetinho de Carne",
        "content": "<h2>Ingredientes</h2><p>Use <strong>alcatra</strong>.</p><ul><li>Sal grosso</li></ul>",
        "seoScore": 92,
        "wordCount": 1800,
        "readingTime": 9,
        "keywordDensity": "1.8%",
        "headingCount": 12,
        "internalLinks": 4,
        "imageCount": 3,
        "metaTags": "<title>Como Fazer Espetinho de Carne</title>",
    }


@pytest.fixture
def article(article_payload):
    return GeneratedArticle.model_validate(article_payload)


@pytest.fixture
def article_config():
    return ArticleConfig()


@pytest.fixture
def mock_genai_client():
    """Fixture to mock the google-genai client."""
    with patch("article_machine.core.gemini_service.genai.Client") as mock_client_class:
        mock_client = mock_client_class.return_value
        mock_client.models = MagicMock()

        def respond(text):
            response = MagicMock()
            response.text = text
            mock_client.models.generate_content.return_value = response

        mock_client.respond = respond
        yield mock_client


@pytest.fixture
def backend(videos, article):
    """Backend double with the three calls of the article flow."""
    mock_backend = MagicMock()
    mock_backend.search_videos.return_value = videos
    mock_backend.generate_transcription.return_value = "Fala, pessoal! Hoje vamos fazer espetinho."
    mock_backend.generate_article.return_value = article
    return mock_backend


@pytest.fixture
def json_text():
    """Serialize a payload the way the model returns it."""
    return lambda payload: json.dumps(payload, ensure_ascii=False)
