"""Copy gate: scrub text, optionally ask for review, then hand it off.

The gate knows nothing about clipboards or editors.  Callers supply:

    write(text)                       where the final text goes
    review(result, confirm) -> bool   show a diff (and ask, if confirm)
    confirm(result) -> bool           yes/no without a diff

Usage:
    outcome = copy_with_shield(text, config, write=clipboard.write)
    print(outcome.message)           # "2 secrets redacted"
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable

from .report import (
    COPY_CANCELLED,
    COPY_WITHOUT_PROTECTION,
    NO_SECRETS_FOUND,
    secrets_redacted_message,
)
from .scrubber import Scrubber, ShieldConfig
from .types import ScrubResult

logger = logging.getLogger(__name__)

Writer = Callable[[str], None]
Reviewer = Callable[[ScrubResult, bool], bool]
Confirmer = Callable[[ScrubResult], bool]


@dataclass(frozen=True, slots=True)
class CopyOutcome:
    copied: bool
    text: str | None          # what was written, None if cancelled
    message: str
    result: ScrubResult | None = None


def copy_with_shield(
    text: str,
    config: ShieldConfig | None = None,
    *,
    write: Writer,
    review: Reviewer | None = None,
    confirm: Confirmer | None = None,
) -> CopyOutcome:
    """Scrub ``text`` and write the safe version.  Missing callbacks approve."""
    config = config or ShieldConfig()
    result = Scrubber(config).scrub(text)

    if not result.has_secrets:
        write(text)
        return CopyOutcome(copied=True, text=text, message=NO_SECRETS_FOUND, result=result)

    approved = True
    if config.show_diff:
        if review is not None:
            approved = review(result, config.show_confirmation)
    elif config.show_confirmation:
        if confirm is not None:
            approved = confirm(result)

    if not approved:
        logger.info("copy cancelled with %d pending redactions", result.count)
        return CopyOutcome(copied=False, text=None, message=COPY_CANCELLED, result=result)

    write(result.scrubbed_text)
    return CopyOutcome(
        copied=True,
        text=result.scrubbed_text,
        message=secrets_redacted_message(result.count),
        result=result,
    )


def copy_without_shield(text: str, *, write: Writer) -> CopyOutcome:
    """Write ``text`` untouched."""
    write(text)
    return CopyOutcome(copied=True, text=text, message=COPY_WITHOUT_PROTECTION)
