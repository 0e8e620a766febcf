"""Slug generation utilities."""

from slugify import slugify

# Matches the width of companies.handle
MAX_HANDLE_LENGTH = 25


def create_slug(text: str, max_length: int = MAX_HANDLE_LENGTH) -> str:
    """
    Create a URL-friendly slug from text, used as a default company handle.

    Args:
        text: The text to convert to a slug
        max_length: Longest slug to return; truncation happens on word boundaries

    Returns:
        A lowercase, hyphenated slug

    Examples:
        >>> create_slug("Acme Corporation")
        'acme-corporation'
        >>> create_slug("AT&T Inc.")
        'at-t-inc'
    """
    return slugify(text, lowercase=True, separator="-", max_length=max_length, word_boundary=True)
