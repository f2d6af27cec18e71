"""
Configuration settings for the SEO article machine.
"""

import os
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Máquina de Artigos SEO"
    APP_VERSION = "0.1.0"
    SITE_NAME = "Barão do Espetinho"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = BASE_DIR / "data"
    ARTICLES_DIR = DATA_DIR / "articles"

    # API keys
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")

    # Default model
    DEFAULT_MODEL = os.getenv("GEMINI_MODEL", "gemini-3-flash-preview")

    # Number of fictitious videos requested per search
    SEARCH_RESULT_COUNT = 6

    # Wizard defaults
    DEFAULT_SEARCH_QUERY = "como fazer espetinho de carne"
    DEFAULT_KEYWORDS = ["espetinho de carne", "como fazer espetinho", "churrasco caseiro"]
    COPY_FEEDBACK_SECONDS = 2.0

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")
    API_URL = os.getenv("API_URL", PUBLIC_URL)
    REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "120"))

    # Create data directories if they don't exist
    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.ARTICLES_DIR.mkdir(parents=True, exist_ok=True)

        # Validate required environment variables
        if not cls.GEMINI_API_KEY:
            print("WARNING: GEMINI_API_KEY environment variable not set.")
            print("Please set it in the .env file or environment variables.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
