"""
SEO Article Machine.

This application lets users search for YouTube videos on a topic, request an
AI transcription of a chosen video and turn it into an SEO article with Gemini.
"""

from article_machine.config import config

__version__ = config.APP_VERSION
