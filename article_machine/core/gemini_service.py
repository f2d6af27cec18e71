"""
Module for generating videos, transcriptions and articles with Gemini.
"""

import json
from typing import List, Optional

from google import genai
from google.genai import types
from pydantic import TypeAdapter, ValidationError

from article_machine.config import config
from article_machine.core import prompts
from article_machine.models.schemas import (
    ArticleConfig,
    GeneratedArticle,
    Video,
    ARTICLE_SCHEMA,
    VIDEO_LIST_SCHEMA,
)
from article_machine.utils.error_handling import (
    ArticleParseError,
    ConfigurationError,
    TRANSCRIPTION_ERROR_SENTINEL,
    log_diagnostic_info,
)
from article_machine.utils.logger import logging


_video_list_adapter = TypeAdapter(List[Video])


def _flag(value: bool) -> str:
    return "true" if value else "false"


class GeminiService:
    """Class to handle the three calls made to the Gemini API."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        """
        Initialize the service with API key.

        Args:
            api_key: Gemini API key (if None, will use the configured one)
            model: Gemini model name (if None, will use the configured default)
        """
        self.api_key = api_key or config.GEMINI_API_KEY
        if not self.api_key:
            raise ConfigurationError("Gemini API key is required. Set GEMINI_API_KEY in .env file or pass directly.")

        self.model = model or config.DEFAULT_MODEL
        self.client = genai.Client(api_key=self.api_key)

    def _generate(self, prompt: str, schema: Optional[types.Schema] = None) -> str:
        generation_config = None
        if schema is not None:
            generation_config = types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=schema,
            )

        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=generation_config,
        )
        return response.text or ""

    def search_videos(self, query: str) -> List[Video]:
        """
        Ask the model for a list of realistic (fictitious) videos about a topic.

        Args:
            query: Free text topic

        Returns:
            List of videos, empty if the response could not be parsed
        """
        prompt = prompts.search_template.format(count=config.SEARCH_RESULT_COUNT, query=query)
        logging.info(f"Searching videos for: {query}")
        text = self._generate(prompt, VIDEO_LIST_SCHEMA)

        try:
            videos = _video_list_adapter.validate_python(json.loads(text))
        except (json.JSONDecodeError, ValidationError) as e:
            logging.error(f"Error parsing search response: {e}")
            log_diagnostic_info({"operation": "search_videos", "query": query, "response": text[:500]})
            return []

        logging.info(f"Search returned {len(videos)} videos")
        return videos

    def generate_transcription(self, video: Video) -> str:
        """
        Generate a stand-in transcription for a video.

        Args:
            video: Selected video

        Returns:
            Transcription text, or a fixed error sentinel when the model returns nothing
        """
        prompt = prompts.transcription_template.format(title=video.title, channel=video.channel)
        logging.info(f"Generating transcription for video {video.id}")
        text = self._generate(prompt)

        if not text:
            logging.warning(f"Empty transcription returned for video {video.id}")
            return TRANSCRIPTION_ERROR_SENTINEL
        return text

    def build_article_prompt(self, video: Video, article_config: ArticleConfig) -> str:
        """Build the article writer prompt for a video and its content options."""
        return prompts.article_template.format(
            site_name=config.SITE_NAME,
            title=video.title,
            transcription=video.transcription or "",
            article_type=article_config.type.value,
            keywords=", ".join(article_config.keywords),
            word_count=article_config.length.target_words,
            include_faq=_flag(article_config.include_faq),
            include_tips=_flag(article_config.include_tips),
            include_recipes=_flag(article_config.include_recipes),
            include_equipment=_flag(article_config.include_equipment),
        )

    def generate_article(self, video: Video, article_config: ArticleConfig) -> GeneratedArticle:
        """
        Write an SEO article from a video transcription.

        Args:
            video: Selected video, with its transcription
            article_config: Content options

        Returns:
            GeneratedArticle

        Raises:
            ArticleParseError: if the model response is not a valid article
        """
        prompt = self.build_article_prompt(video, article_config)
        logging.info(f"Generating {article_config.type.value} article for video {video.id}")
        text = self._generate(prompt, ARTICLE_SCHEMA)

        try:
            article = GeneratedArticle.model_validate(json.loads(text))
        except (json.JSONDecodeError, ValidationError) as e:
            logging.error(f"Error parsing article response: {e}")
            log_diagnostic_info({"operation": "generate_article", "video_id": video.id, "response": text[:500]})
            raise ArticleParseError() from e

        logging.info(f"Article generated: '{article.title}' ({article.word_count} words, SEO {article.seo_score})")
        return article
