"""
View state of the three-step article wizard.

The wizard moves between three steps:

1. Busca: search for videos on a topic
2. Configuração: the selected video is transcribed and the article options are set
3. Publicação: the article is generated and shown

Every transition that talks to the AI is split in a ``begin_*`` part, which
only updates the view state (so the UI can show a loading state), and a
``finish_*`` part, which performs the call. ``select_video`` and
``generate_article`` run both halves in one go.

The backend is anything with ``search_videos``, ``generate_transcription``
and ``generate_article`` methods: the HTTP ``ApiClient`` used by the
frontend or the ``GeminiService`` itself.
"""

import time
import traceback
from typing import List, Optional

from article_machine.config import config
from article_machine.models.schemas import ArticleConfig, GeneratedArticle, Video
from article_machine.utils.error_handling import ARTICLE_ALERT_MESSAGE
from article_machine.utils.helpers import parse_keywords, strip_html_tags
from article_machine.utils.logger import logging

STEP_SEARCH = 1
STEP_CONFIGURE = 2
STEP_RESULT = 3

STEPS = [
    (STEP_SEARCH, "Busca"),
    (STEP_CONFIGURE, "Configuração"),
    (STEP_RESULT, "Publicação"),
]

SCROLL_TOP = "top"
SCROLL_STEP2 = "step2"
SCROLL_STEP3 = "step3"


class WizardState:
    """Mutable view state for one user session."""

    def __init__(self, search_query: str = config.DEFAULT_SEARCH_QUERY):
        self.current_step = STEP_SEARCH
        self.search_query = search_query
        self.videos: List[Video] = []
        self.selected_video: Optional[Video] = None
        self.is_searching = False
        self.is_transcribing = False
        self.is_generating = False
        self.article: Optional[GeneratedArticle] = None
        self.config = ArticleConfig()
        self.copied_at: Optional[float] = None
        self.scroll_target: Optional[str] = None
        self.alert: Optional[str] = None

    # Step 1

    def search(self, backend) -> bool:
        """
        Search for videos about the current query.

        Returns:
            True if a search was attempted
        """
        if not self.search_query.strip():
            return False

        self.is_searching = True
        try:
            self.videos = backend.search_videos(self.search_query)
            # Stay on step 1 until a video is selected
            self.current_step = STEP_SEARCH
        except Exception as e:
            logging.error(f"Error searching videos: {str(e)}")
            logging.error(traceback.format_exc())
        finally:
            self.is_searching = False
        return True

    # Step 2

    def begin_transcription(self, video: Video) -> bool:
        """Select a video and move to step 2 while it is transcribed."""
        if self.is_transcribing:
            return False

        self.selected_video = video.model_copy()
        self.is_transcribing = True
        self.current_step = STEP_CONFIGURE
        return True

    def finish_transcription(self, backend) -> None:
        """Transcribe the selected video; go back to step 1 on failure."""
        if self.selected_video is None:
            self.is_transcribing = False
            return

        try:
            transcription = backend.generate_transcription(self.selected_video)
            self.selected_video = self.selected_video.model_copy(update={"transcription": transcription})
            self.scroll_target = SCROLL_STEP2
        except Exception as e:
            logging.error(f"Error generating transcription: {str(e)}")
            logging.error(traceback.format_exc())
            self.current_step = STEP_SEARCH
        finally:
            self.is_transcribing = False

    def select_video(self, video: Video, backend) -> bool:
        """
        Select a video and generate its transcription.

        Returns:
            False if the selection was ignored because a transcription is running
        """
        if not self.begin_transcription(video):
            return False
        self.finish_transcription(backend)
        return True

    def update_keywords(self, text: str) -> None:
        self.config = self.config.model_copy(update={"keywords": parse_keywords(text)})

    def update_config(self, **changes) -> None:
        self.config = self.config.model_copy(update=changes)

    @property
    def can_generate(self) -> bool:
        return bool(self.selected_video and self.selected_video.transcription)

    # Step 3

    def begin_generation(self) -> bool:
        """Move to step 3 while the article is generated."""
        if not self.can_generate:
            return False

        self.is_generating = True
        self.alert = None
        self.current_step = STEP_RESULT
        return True

    def finish_generation(self, backend) -> None:
        """Generate the article; alert and go back to step 2 on failure."""
        if not self.can_generate:
            self.is_generating = False
            return

        try:
            self.article = backend.generate_article(self.selected_video, self.config)
            self.scroll_target = SCROLL_STEP3
        except Exception as e:
            logging.error(f"Error generating article: {str(e)}")
            logging.error(traceback.format_exc())
            self.alert = ARTICLE_ALERT_MESSAGE
            self.current_step = STEP_CONFIGURE
        finally:
            self.is_generating = False

    def generate_article(self, backend) -> bool:
        """
        Generate the article for the selected video.

        Returns:
            False if there is no transcription to write from
        """
        if not self.begin_generation():
            return False
        self.finish_generation(backend)
        return True

    def copy_article(self, now: Optional[float] = None) -> Optional[str]:
        """
        Prepare the article for the clipboard.

        Returns:
            The article content with every HTML tag removed, or None without an article
        """
        if self.article is None:
            return None

        self.copied_at = time.monotonic() if now is None else now
        return strip_html_tags(self.article.content)

    def is_copied(self, now: Optional[float] = None) -> bool:
        """Whether the "copied" indicator should still be shown."""
        if self.copied_at is None:
            return False
        now = time.monotonic() if now is None else now
        return now - self.copied_at < config.COPY_FEEDBACK_SECONDS

    def consume_scroll(self) -> Optional[str]:
        target, self.scroll_target = self.scroll_target, None
        return target

    def consume_alert(self) -> Optional[str]:
        alert, self.alert = self.alert, None
        return alert

    def reset(self) -> None:
        """Start over from step 1."""
        self.current_step = STEP_SEARCH
        self.selected_video = None
        self.article = None
        self.videos = []
        self.copied_at = None
        self.scroll_target = SCROLL_TOP
