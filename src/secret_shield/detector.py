"""Detector: scan text against the catalog and collect occurrences.

Each pattern is scanned independently over the whole text.  Exact
duplicates (same span and value) are dropped; overlaps between
different patterns are kept and left to ``resolve_overlaps``.
"""

from __future__ import annotations
import logging
import re
from typing import Iterable, Iterator

from .patterns import PatternDefinition, catalog_rank, patterns_for
from .types import DetectedSecret, Sensitivity

logger = logging.getLogger(__name__)

CONTEXT_WINDOW = 50

# identifier, optional spaces, ':' or '=', optional spaces, optional quote, end of window
_CONTEXT_RE = re.compile(r"([a-zA-Z_][a-zA-Z0-9_]*)\s*[:=]\s*['\"]?\Z")


def extract_context(text: str, start: int) -> str | None:
    """Return the variable/key name directly before ``start``, if any."""
    before = text[max(0, start - CONTEXT_WINDOW):start]
    m = _CONTEXT_RE.search(before)
    return m.group(1) if m else None


def iter_matches(text: str, pattern: PatternDefinition) -> Iterator[DetectedSecret]:
    """Yield every non-overlapping match of one pattern, left to right."""
    for m in pattern.pattern.finditer(text):
        yield DetectedSecret(
            secret_type=pattern.secret_type,
            value=m.group(),
            start=m.start(),
            end=m.end(),
            confidence=pattern.confidence,
            context=extract_context(text, m.start()),
            description=pattern.description,
        )


def detect(text: str, sensitivity: Sensitivity | str = Sensitivity.BALANCED) -> list[DetectedSecret]:
    """Detect secrets in text.  Result is sorted by start offset."""
    active = patterns_for(sensitivity)
    found: list[DetectedSecret] = []
    for pattern in active:
        found.extend(iter_matches(text, pattern))
    unique = _deduplicate(found)
    logger.debug("detect: %d patterns, %d matches, %d unique",
                 len(active), len(found), len(unique))
    return unique


def _deduplicate(secrets: list[DetectedSecret]) -> list[DetectedSecret]:
    """Drop exact (start, end, value) repeats; keep the first seen."""
    seen: set[tuple[int, int, str]] = set()
    unique: list[DetectedSecret] = []
    for s in secrets:
        key = (s.start, s.end, s.value)
        if key not in seen:
            seen.add(key)
            unique.append(s)
    # stable: equal starts keep catalog order
    return sorted(unique, key=lambda s: s.start)


def resolve_overlaps(secrets: Iterable[DetectedSecret]) -> list[DetectedSecret]:
    """Remove overlapping occurrences so the survivors can be spliced safely.

    Higher confidence wins, then the longer span, then the pattern that
    comes first in the catalog, then the earlier start.
    """
    ranked = sorted(secrets, key=lambda s: (
        -s.confidence, -(s.end - s.start), catalog_rank(s.description), s.start,
    ))
    taken: list[DetectedSecret] = []
    used: list[tuple[int, int]] = []
    for s in ranked:
        if not any(s.start < e and s.end > b for b, e in used):
            taken.append(s)
            used.append((s.start, s.end))
    if len(taken) < len(ranked):
        logger.debug("resolve_overlaps: dropped %d overlapping matches", len(ranked) - len(taken))
    return sorted(taken, key=lambda s: s.start)
