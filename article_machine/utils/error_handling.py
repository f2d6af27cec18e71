"""
Centralized error handling for the application.
"""

import json
from typing import Dict, Any

from article_machine.config import config
from article_machine.utils.logger import logging


ARTICLE_PARSE_ERROR_MESSAGE = "Erro ao processar o artigo gerado pela IA."
TRANSCRIPTION_ERROR_SENTINEL = "Erro ao gerar transcrição."
ARTICLE_ALERT_MESSAGE = "Erro ao gerar artigo."


class ArticleMachineError(Exception):
    """Base class for application errors."""


class ConfigurationError(ArticleMachineError, ValueError):
    """Raised when a required setting (such as the Gemini API key) is missing."""


class ArticleParseError(ArticleMachineError):
    """Raised when the article returned by the model is not valid JSON."""

    def __init__(self, message: str = ARTICLE_PARSE_ERROR_MESSAGE):
        super().__init__(message)


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not getattr(config, "DEBUG", False):
        return

    try:
        logging.info(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
