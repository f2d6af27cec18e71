"""
Request and response bodies for the SEO article machine API.
"""

from pydantic import BaseModel, Field
from article_machine.models.schemas import ArticleConfig, Video


class SearchRequest(BaseModel):
    """Model for video search requests."""
    query: str


class TranscriptionRequest(BaseModel):
    """Model for transcription requests."""
    video: Video


class TranscriptionResponse(BaseModel):
    """Model for transcription responses."""
    video_id: str
    transcription: str


class ArticleRequest(BaseModel):
    """Model for article generation requests."""
    video: Video
    config: ArticleConfig = Field(default_factory=ArticleConfig)


class HealthResponse(BaseModel):
    """Model for health check responses."""
    status: str
    api_key_configured: bool
    model: str
