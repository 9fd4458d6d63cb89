"""URL extraction from free text."""

import re

from linkscrub.url.parser import is_valid


URL_PATTERN = re.compile(r'https?://[^\s<>"]+', re.IGNORECASE)


def extract(text: str) -> list[str]:
    """Extract http(s) URLs from text.

    Matches are deduplicated by exact string and filtered to valid URLs;
    order follows first occurrence in the text.

    Args:
        text: Arbitrary text

    Returns:
        Valid URLs found in the text
    """
    if not text:
        return []

    matches = dict.fromkeys(URL_PATTERN.findall(text))
    return [url for url in matches if is_valid(url)]
