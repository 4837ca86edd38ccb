"""Human-readable output for scrub results: summaries, diffs, messages."""

from __future__ import annotations
import difflib

from .types import ScrubResult

NO_SECRETS_FOUND = "No secrets detected - copied safely!"
COPY_CANCELLED = "Copy operation cancelled"
COPY_WITHOUT_PROTECTION = "Copied without protection"
DIFF_PREVIEW_TITLE = "SecretShield: Review Redactions"


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def secrets_redacted_message(count: int) -> str:
    return f"{count} secret{_plural(count)} redacted"


def confirmation_prompt(count: int) -> str:
    return f"{count} secret{_plural(count)} will be redacted. Continue?"


def create_summary(result: ScrubResult, *, show_values: bool = True) -> str:
    """One line per redaction, or a single 'nothing found' line."""
    if not result.has_secrets:
        return "No secrets detected."

    lines = [f"Found {result.count} secret{_plural(result.count)}:", ""]
    for r in result.redactions:
        if show_values:
            lines.append(f"- {r.secret_type.value}: {r.original} -> {r.redacted}")
        else:
            lines.append(f"- {r.secret_type.value} at {r.start}-{r.end} -> {r.redacted}")
    return "\n".join(lines)


def unified_diff(result: ScrubResult, *, context: int = 3) -> str:
    """Unified diff of original vs scrubbed text ('' when identical)."""
    diff = difflib.unified_diff(
        result.original_text.splitlines(keepends=True),
        result.scrubbed_text.splitlines(keepends=True),
        fromfile="original",
        tofile="scrubbed",
        n=context,
    )
    return "".join(diff)
