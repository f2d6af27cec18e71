"""
API routes for the SEO article machine.
"""

import traceback
from typing import List
from functools import lru_cache
from fastapi import APIRouter, HTTPException, Depends

from article_machine.api.schemas import (
    SearchRequest,
    TranscriptionRequest,
    TranscriptionResponse,
    ArticleRequest,
    HealthResponse,
)
from article_machine.config import config
from article_machine.core.gemini_service import GeminiService
from article_machine.models.schemas import GeneratedArticle, Video
from article_machine.utils.error_handling import ArticleParseError, ConfigurationError
from article_machine.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["articles"])


@lru_cache(maxsize=1)
def _service() -> GeminiService:
    return GeminiService()


def get_service() -> GeminiService:
    """Dependency returning the shared Gemini service."""
    try:
        return _service()
    except ConfigurationError as e:
        logging.error(str(e))
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/health", response_model=HealthResponse)
async def health():
    """Report whether the service is able to reach Gemini."""
    return HealthResponse(
        status="ok",
        api_key_configured=bool(config.GEMINI_API_KEY),
        model=config.DEFAULT_MODEL,
    )


@router.post("/videos/search", response_model=List[Video])
def search_videos(request: SearchRequest, service: GeminiService = Depends(get_service)):
    """
    Search for (fictitious) YouTube videos about a topic.

    - An unparseable model response yields an empty list
    """
    if not request.query.strip():
        raise HTTPException(status_code=400, detail="Search query must not be empty")

    try:
        return service.search_videos(request.query)
    except Exception as e:
        logging.error(f"Error searching videos: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail=f"Error searching videos: {str(e)}")


@router.post("/videos/transcription", response_model=TranscriptionResponse)
def transcribe_video(request: TranscriptionRequest, service: GeminiService = Depends(get_service)):
    """Generate the transcription of a selected video."""
    try:
        transcription = service.generate_transcription(request.video)
    except Exception as e:
        logging.error(f"Error generating transcription: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail=f"Error generating transcription: {str(e)}")

    return TranscriptionResponse(video_id=request.video.id, transcription=transcription)


@router.post("/articles", response_model=GeneratedArticle, response_model_by_alias=True)
def generate_article(request: ArticleRequest, service: GeminiService = Depends(get_service)):
    """Write an SEO article from a transcribed video."""
    if not request.video.transcription:
        raise HTTPException(status_code=400, detail="Video has no transcription")

    try:
        return service.generate_article(request.video, request.config)
    except ArticleParseError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logging.error(f"Error generating article: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail=f"Error generating article: {str(e)}")
