"""Link href normalization."""

from typing import Callable, Optional
from urllib.parse import urljoin, urlparse

# Rewrites a raw link href, e.g. to resolve it against the manifest location
HrefNormalizer = Callable[[str], str]


def identity_href_normalizer(href: str) -> str:
    """Return the href unchanged."""
    return href


def is_absolute_href(href: str) -> bool:
    """Check if an href carries its own scheme (http:, urn:, data:, ...)."""
    return bool(urlparse(href).scheme)


def href_normalizer_for_base(base_url: Optional[str]) -> HrefNormalizer:
    """
    Build a normalizer resolving relative hrefs against a base URL.

    Args:
        base_url: URL of the manifest (usually its "self" link), or None

    Returns:
        Normalizer resolving relative hrefs; the identity when base_url is None
    """
    if not base_url:
        return identity_href_normalizer

    def normalize(href: str) -> str:
        if is_absolute_href(href):
            return href
        return urljoin(base_url, href)

    return normalize
