"""
Helper utility functions for the SEO article machine.
"""

import json
import re
from typing import Dict, Any, List
from pathlib import Path

from bs4 import BeautifulSoup


TAG_PATTERN = re.compile(r"<[^>]*>")

# Elements removed entirely (with their content) before rendering
UNSAFE_TAGS = ["script", "style", "iframe", "object", "embed", "form", "link", "meta", "base"]
URL_ATTRIBUTES = {"href", "src", "action", "formaction", "xlink:href"}
ALLOWED_SCHEMES = {"http", "https", "mailto"}

# Browsers ignore ASCII control characters and whitespace inside a URL scheme
URL_IGNORED_CHARS = re.compile(r"[\x00-\x20\x7f]")
SCHEME_PATTERN = re.compile(r"^([a-z][a-z0-9+.\-]*):")


def strip_html_tags(html: str) -> str:
    """
    Remove every HTML tag from a string, keeping the text between them.

    Args:
        html: HTML text

    Returns:
        Plain text
    """
    return TAG_PATTERN.sub("", html or "")


def is_safe_url(url: str) -> bool:
    """
    Check whether a URL may be kept in rendered HTML.

    Args:
        url: Attribute value, already entity-decoded

    Returns:
        True for relative URLs and http, https or mailto URLs
    """
    normalized = URL_IGNORED_CHARS.sub("", url).lower()
    match = SCHEME_PATTERN.match(normalized)
    if match is None:
        return True
    return match.group(1) in ALLOWED_SCHEMES


def sanitize_html(html: str) -> str:
    """
    Make model-generated HTML safe to inject into the page.

    Drops executable elements, inline event handlers and URLs whose scheme is
    not http, https or mailto. Relative URLs are kept.
    Formatting tags (h2, h3, p, strong, ul, li...) are kept.

    Args:
        html: HTML returned by the model

    Returns:
        Sanitized HTML
    """
    soup = BeautifulSoup(html or "", "html.parser")

    for tag in soup.find_all(UNSAFE_TAGS):
        tag.decompose()

    for tag in soup.find_all(True):
        for attr in list(tag.attrs):
            name = attr.lower()
            if name.startswith("on"):
                del tag.attrs[attr]
            elif name in URL_ATTRIBUTES:
                if not is_safe_url(str(tag.attrs[attr])):
                    del tag.attrs[attr]

    return str(soup)


def parse_keywords(text: str) -> List[str]:
    """
    Split a comma separated keyword string.

    Args:
        text: Keywords as typed by the user

    Returns:
        List of trimmed keywords, in order
    """
    return [keyword.strip() for keyword in (text or "").split(",")]


def save_json(data: Dict[str, Any], filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file.

    Args:
        data: Data to save
        filepath: Path to save the file
        pretty: Whether to format the JSON for readability
    """
    Path(filepath).parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False)
        else:
            json.dump(data, f, ensure_ascii=False)

