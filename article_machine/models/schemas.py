"""
Data models for the SEO article machine.
"""
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator
from google.genai import types

from article_machine.config import config


class ArticleType(str, Enum):
    """Article styles the writer can be asked for."""
    GUIDE = "guide"
    TUTORIAL = "tutorial"
    LIST = "list"
    COMPARISON = "comparison"
    NEWS = "news"


class ArticleLength(str, Enum):
    """Approximate article sizes."""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    DETAILED = "detailed"

    @property
    def target_words(self) -> int:
        if self is ArticleLength.SHORT:
            return 1000
        if self is ArticleLength.MEDIUM:
            return 1800
        return 2500


class Video(BaseModel):
    """A (fictitious) YouTube video returned by the search call."""
    id: str
    title: str
    channel: str
    duration: str
    thumbnail: str
    views: str
    published: str
    transcription: Optional[str] = None


class ArticleConfig(BaseModel):
    """Content options for article generation."""
    model_config = ConfigDict(populate_by_name=True)

    type: ArticleType = ArticleType.GUIDE
    keywords: List[str] = Field(default_factory=lambda: list(config.DEFAULT_KEYWORDS))
    length: ArticleLength = ArticleLength.MEDIUM
    include_faq: bool = Field(True, alias="includeFAQ")
    include_tips: bool = Field(True, alias="includeTips")
    include_recipes: bool = Field(True, alias="includeRecipes")
    include_equipment: bool = Field(False, alias="includeEquipment")


class GeneratedArticle(BaseModel):
    """Article returned by the writer, with its SEO metrics."""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    content: str
    seo_score: float = Field(..., alias="seoScore")
    word_count: int = Field(..., alias="wordCount")
    reading_time: float = Field(..., alias="readingTime")
    keyword_density: str = Field(..., alias="keywordDensity")
    heading_count: int = Field(..., alias="headingCount")
    internal_links: int = Field(..., alias="internalLinks")
    image_count: int = Field(..., alias="imageCount")
    meta_tags: str = Field(..., alias="metaTags")

    @field_validator("seo_score")
    def clamp_seo_score(cls, v):
        return max(0.0, min(100.0, v))

    @field_validator("word_count", "heading_count", "internal_links", "image_count", mode="before")
    def round_counts(cls, v):
        # The model returns NUMBER fields, which may come back as floats
        if isinstance(v, float):
            return int(round(v))
        return v


# Response schemas sent to Gemini

VIDEO_FIELDS = ["id", "title", "channel", "duration", "thumbnail", "views", "published"]

VIDEO_LIST_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={name: types.Schema(type=types.Type.STRING) for name in VIDEO_FIELDS},
        required=VIDEO_FIELDS,
    ),
)

ARTICLE_FIELDS = {
    "title": types.Type.STRING,
    "content": types.Type.STRING,
    "seoScore": types.Type.NUMBER,
    "wordCount": types.Type.NUMBER,
    "readingTime": types.Type.NUMBER,
    "keywordDensity": types.Type.STRING,
    "headingCount": types.Type.NUMBER,
    "internalLinks": types.Type.NUMBER,
    "imageCount": types.Type.NUMBER,
    "metaTags": types.Type.STRING,
}

ARTICLE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={name: types.Schema(type=kind) for name, kind in ARTICLE_FIELDS.items()},
    required=list(ARTICLE_FIELDS),
)
