"""
Command line entry point for the SEO article machine.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from article_machine.models.schemas import (
    ArticleConfig,
    ArticleLength,
    ArticleType,
    GeneratedArticle,
    Video,
)
from article_machine.core.gemini_service import GeminiService
from article_machine.config import config
from article_machine.utils.helpers import parse_keywords, save_json
from article_machine.utils.logger import logging


def save_article(video: Video, article: GeneratedArticle, output_file: str = None) -> Path:
    """Save the article, with the video it came from, to a JSON file."""
    if output_file is None:
        output_file = Path(config.ARTICLES_DIR) / f"{video.id}_article.json"
    else:
        output_file = Path(output_file)

    save_json(
        {
            "video": video.model_dump(mode="json"),
            "article": article.model_dump(mode="json", by_alias=True),
        },
        str(output_file),
    )

    logging.info(f"Article saved to: {output_file}")
    return output_file


def generate_article_for_topic(
    query: str,
    article_config: ArticleConfig,
    video_index: int = 0,
    output_file: str = None,
    service: Optional[GeminiService] = None,
) -> GeneratedArticle:
    """
    Run the whole flow for a topic: search, transcribe, write.

    Args:
        query: Topic to search videos for
        article_config: Content options
        video_index: Which search result to use
        output_file: Optional file path to save the article
        service: Gemini service to use (created from the config if None)

    Returns:
        GeneratedArticle object
    """
    service = service or GeminiService()

    # 1. Search
    videos: List[Video] = service.search_videos(query)
    if not videos:
        raise RuntimeError(f"No videos found for: {query}")
    if not 0 <= video_index < len(videos):
        raise IndexError(f"Video index {video_index} out of range (found {len(videos)} videos)")

    video = videos[video_index]
    logging.info(f"Selected video: {video.title} ({video.channel})")

    # 2. Transcribe
    transcription = service.generate_transcription(video)
    video = video.model_copy(update={"transcription": transcription})

    # 3. Write
    article = service.generate_article(video, article_config)

    save_article(video, article, output_file)
    return article


def build_config(args: argparse.Namespace) -> ArticleConfig:
    """Build the article options from parsed command line arguments."""
    return ArticleConfig(
        type=ArticleType(args.type),
        keywords=parse_keywords(args.keywords) if args.keywords else list(config.DEFAULT_KEYWORDS),
        length=ArticleLength(args.length),
        include_faq=not args.no_faq,
        include_tips=not args.no_tips,
        include_recipes=not args.no_recipes,
        include_equipment=args.equipment,
    )


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="SEO article machine")
    parser.add_argument("query", nargs="?", default=config.DEFAULT_SEARCH_QUERY, help="Topic to search videos for")
    parser.add_argument("--video-index", type=int, default=0, help="Which search result to write about")
    parser.add_argument("--type", default=ArticleType.GUIDE.value,
                        choices=[t.value for t in ArticleType], help="Article style")
    parser.add_argument("--length", default=ArticleLength.MEDIUM.value,
                        choices=[l.value for l in ArticleLength], help="Article length")
    parser.add_argument("--keywords", help="Comma separated SEO keywords")
    parser.add_argument("--no-faq", action="store_true", help="Do not include a FAQ section")
    parser.add_argument("--no-tips", action="store_true", help="Do not include a tips box")
    parser.add_argument("--no-recipes", action="store_true", help="Do not include a full recipe")
    parser.add_argument("--equipment", action="store_true", help="Include an equipment section")
    parser.add_argument("--output", help="Output file path for the article")

    args = parser.parse_args()

    config.initialize()

    article = generate_article_for_topic(args.query, build_config(args), args.video_index, args.output)

    print("\n" + "=" * 80)
    print(f"{article.title}  (SEO {article.seo_score:g}, {article.word_count} palavras)")
    print("=" * 80)
    print(article.meta_tags)
    print("=" * 80)


if __name__ == "__main__":
    main()
