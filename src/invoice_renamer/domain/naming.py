"""Filename derivation: issuer slugs and collision-free paths."""

import logging
import re
import unicodedata
from pathlib import Path

from ..ports.storage import StoragePort

logger = logging.getLogger(__name__)

MAX_SLUG_LENGTH = 80
MAX_ATTEMPTS = 10_000
FALLBACK_SLUG = "brak_nazwy"

_POLISH_TABLE = str.maketrans(
    "ąćęłńóśźżĄĆĘŁŃÓŚŹŻ",
    "acelnoszzACELNOSZZ",
)
_NON_SLUG = re.compile(r"[^a-z0-9]+")


def strip_polish_diacritics(value: str) -> str:
    return value.translate(_POLISH_TABLE)


def sanitize(raw: str) -> str:
    """Turn an issuer name into a lowercase ASCII slug.

    Never raises; returns "" when nothing usable is left.
    """
    value = strip_polish_diacritics(raw)
    # ł has no decomposition, hence the table above
    value = unicodedata.normalize("NFKD", value)
    value = "".join(c for c in value if not unicodedata.combining(c))
    value = _NON_SLUG.sub("_", value.lower()).strip("_")
    return value[:MAX_SLUG_LENGTH].rstrip("_")


def build_target_filename(issue_date: str, issuer_name: str, extension: str) -> str:
    """Build "RRMMDD_issuer_slug.ext"."""
    slug = sanitize(issuer_name) or FALLBACK_SLUG
    return f"{issue_date}_{slug}{extension}"


def resolve_unique_path(storage: StoragePort, desired: Path) -> Path:
    """Return desired, or desired with "_N" before the suffix if taken."""
    candidate = desired
    attempt = 0

    while storage.exists(candidate):
        attempt += 1
        if attempt > MAX_ATTEMPTS:
            raise FileExistsError(f"No free name for {desired.name} after {MAX_ATTEMPTS} attempts")
        candidate = desired.with_name(f"{desired.stem}_{attempt}{desired.suffix}")

    if attempt:
        logger.debug(f"Name taken: {desired.name} -> {candidate.name}")
    return candidate
