"""
API client for communicating with the SEO article machine backend.
"""

import requests
from typing import Dict, List, Any
from urllib.parse import urljoin

from article_machine.config import config
from article_machine.models.schemas import ArticleConfig, GeneratedArticle, Video


class ApiClient:
    """Client for interacting with the SEO article machine API."""

    def __init__(self, base_url: str = config.API_URL, timeout: int = config.REQUEST_TIMEOUT):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for each request
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/v1/")
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def _post(self, endpoint: str, payload: Dict[str, Any]) -> Any:
        response = requests.post(self._url(endpoint), json=payload, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def health(self) -> Dict[str, Any]:
        """Get the API health status."""
        response = requests.get(self._url("health"), timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def search_videos(self, query: str) -> List[Video]:
        """
        Search for videos about a topic.

        Args:
            query: Free text topic

        Returns:
            List of videos
        """
        data = self._post("videos/search", {"query": query})
        return [Video.model_validate(item) for item in data]

    def generate_transcription(self, video: Video) -> str:
        """
        Request the transcription of a video.

        Args:
            video: Selected video

        Returns:
            Transcription text
        """
        data = self._post("videos/transcription", {"video": video.model_dump(mode="json")})
        return data["transcription"]

    def generate_article(self, video: Video, article_config: ArticleConfig) -> GeneratedArticle:
        """
        Request an SEO article for a transcribed video.

        Args:
            video: Selected video with its transcription
            article_config: Content options

        Returns:
            GeneratedArticle
        """
        data = self._post(
            "articles",
            {
                "video": video.model_dump(mode="json"),
                "config": article_config.model_dump(mode="json", by_alias=True),
            },
        )
        return GeneratedArticle.model_validate(data)
