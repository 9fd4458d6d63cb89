"""URL deduplication.

Duplicates are detected by exact string equality after trimming
surrounding whitespace; no normalization is applied, so
``https://a.com`` and ``https://a.com/`` are different URLs.
"""

from collections.abc import Iterable


class URLDeduper:
    """Deduplicate URLs, keeping the first occurrence of each."""

    def remove_duplicates(self, urls: Iterable[str]) -> list[str]:
        """Deduplicate a list of URLs.

        Args:
            urls: URLs to deduplicate

        Returns:
            Trimmed URLs in first-occurrence order, each exactly once
        """
        seen: set[str] = set()
        unique: list[str] = []

        for url in urls:
            url = url.strip()
            if url not in seen:
                seen.add(url)
                unique.append(url)

        return unique

    def count_duplicates(self, urls: Iterable[str]) -> int:
        """Number of entries remove_duplicates would drop."""
        urls = list(urls)
        return len(urls) - len(self.remove_duplicates(urls))
