"""
Slug helpers.

A slug is the lowercase, hyphen-separated form of a contact's name
("Sam Flynn" -> "sam-flynn"), used as a human-readable unique key.
"""

import re
import unicodedata
import uuid
from typing import Callable, Optional

from curem.config import Config
from curem.utils.error_handler import DuplicateSlugError
from curem.utils.logging_utils import get_logger

logger = get_logger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

FALLBACK_SLUG = "contact"


def slugify(text: str) -> str:
    """
    Deterministic slug for `text`.

    Unicode is folded to ASCII, the result lowercased and every run of
    non-alphanumerics collapsed to a single hyphen. Returns "" when nothing
    alphanumeric is left.
    """
    if not text:
        return ""
    ascii_text = (
        unicodedata.normalize("NFKD", text)
        .encode("ascii", "ignore")
        .decode("ascii")
    )
    return _NON_ALNUM.sub("-", ascii_text.lower()).strip("-")


class SlugGenerator:
    """Produces slugs that are not yet taken in the contacts collection."""

    def __init__(
        self,
        slug_exists: Callable[[str], bool],
        max_attempts: Optional[int] = None,
    ):
        """
        Parameters
        ----------
        slug_exists : callable
            Returns True when a contact already carries the slug
            (normally ``ContactRepository.slug_exists``).
        max_attempts : int, optional
            Counter suffixes to try before the random fallback.
        """
        self._slug_exists = slug_exists
        self.max_attempts = max_attempts if max_attempts is not None else Config.SLUG_MAX_ATTEMPTS

    def slug_exists(self, candidate: str) -> bool:
        return self._slug_exists(candidate)

    def generate(self, person: str) -> str:
        """Base slug for a person's name, never empty"""
        return slugify(person) or FALLBACK_SLUG

    def unique_slug(self, person: str) -> str:
        """
        Derive a slug from `person` that no stored contact carries.

        Tries the base slug, then base-2, base-3 and so on. Once
        `max_attempts` candidates are taken a single random suffix is tried;
        if even that collides DuplicateSlugError is raised.
        """
        base = self.generate(person)
        if not self.slug_exists(base):
            return base

        for n in range(2, self.max_attempts + 1):
            candidate = f"{base}-{n}"
            if not self.slug_exists(candidate):
                logger.debug(f"Slug '{base}' taken, using '{candidate}'")
                return candidate

        candidate = f"{base}-{uuid.uuid4().hex[:8]}"
        if not self.slug_exists(candidate):
            logger.warning(f"Counter suffixes exhausted for '{base}', using '{candidate}'")
            return candidate

        raise DuplicateSlugError(f"Could not find a free slug for '{person}'")

    def claim(self, slug_hint: str) -> str:
        """
        Normalize a caller-supplied slug and make sure it is free.

        The hint is never disambiguated: a taken hint is rejected.
        """
        slug = slugify(slug_hint)
        if not slug:
            return ""
        if self.slug_exists(slug):
            raise DuplicateSlugError(f"Slug '{slug}' already exists")
        return slug
