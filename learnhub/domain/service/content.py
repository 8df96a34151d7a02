"""User-generated text cleaning.

Content is stored as plain text. All markup is stripped and the
remaining HTML special characters are escaped before storage, so clients
can render it as-is.
"""

import re

import bleach

from learnhub.domain.error import ValidationError

MENTION_PATTERN = re.compile(r"@([A-Za-z0-9_]+)")


def sanitize_content(raw: str, max_length: int, label: str = "Content") -> str:
    """Strip markup from user input and validate its length.

    Args:
        raw: Text as submitted by the client
        max_length: Maximum length after sanitizing
        label: Name used in error messages

    Returns:
        Sanitized, trimmed text

    Raises:
        ValidationError: If the text is empty or too long after sanitizing
    """
    cleaned = bleach.clean(raw or "", tags=[], attributes={}, strip=True).strip()
    if not cleaned:
        raise ValidationError(f"{label} is required")
    if len(cleaned) > max_length:
        raise ValidationError(f"{label} cannot exceed {max_length} characters")
    return cleaned


def extract_mentions(content: str) -> list[str]:
    """Usernames mentioned as ``@name``, lower-cased, first occurrence first."""
    seen: dict[str, None] = {}
    for match in MENTION_PATTERN.finditer(content):
        seen.setdefault(match.group(1).lower(), None)
    return list(seen)
