"""CLI interface for secret-shield: a gate to run text through before it leaves.

Usage:
    # Scrub stdin, print the safe text
    cat notes.md | secret-shield scrub

    # Full result as JSON, diff on stderr
    cat .env | secret-shield --style labeled scrub --json --diff

    # List detections (values hidden unless --show-values)
    secret-shield --sensitivity strict scan --fail-on-secrets < config.py

    # Copy gate: review, confirm, write the result to a file
    secret-shield copy --output safe.txt < draft.txt

Settings come from --config (or $SECRET_SHIELD_CONFIG), then flags.
"""

from __future__ import annotations
import argparse
import dataclasses
import json
import logging
import os
import sys
from pathlib import Path

from .config import load_config, load_from_yaml
from .detector import detect
from .policy import should_redact
from .report import DIFF_PREVIEW_TITLE, confirmation_prompt, create_summary, unified_diff
from .scrubber import Scrubber, ShieldConfig
from .shield import copy_with_shield, copy_without_shield
from .types import InvalidConfiguration, RedactionStyle, ScrubResult, Sensitivity

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = os.environ.get("SECRET_SHIELD_CONFIG", "")


def _build_config(args: argparse.Namespace) -> ShieldConfig:
    if args.config:
        config = load_from_yaml(args.config)
    else:
        config = load_config(None)

    overrides: dict = {}
    if args.style:
        overrides["redaction_style"] = args.style
    if args.sensitivity:
        overrides["sensitivity"] = args.sensitivity
    if args.allow:
        overrides["allow_list"] = config.allow_list + tuple(args.allow)
    if args.deny:
        overrides["deny_list"] = config.deny_list + tuple(args.deny)
    if getattr(args, "diff", False):
        overrides["show_diff"] = True
    if getattr(args, "confirm", False):
        overrides["show_confirmation"] = True
    return dataclasses.replace(config, **overrides) if overrides else config


def _ask(question: str) -> bool:
    """Ask a yes/no question on the terminal (stdin carries the text)."""
    try:
        with open("/dev/tty") as tty:
            sys.stderr.write(f"{question} [y/N] ")
            sys.stderr.flush()
            answer = tty.readline()
    except OSError:
        logger.warning("no terminal to confirm on, treating as 'no'")
        return False
    return answer.strip().lower() in ("y", "yes")


def _review(result: ScrubResult, confirm: bool) -> bool:
    sys.stderr.write(f"{DIFF_PREVIEW_TITLE}\n")
    sys.stderr.write(unified_diff(result))
    if not confirm:
        return True
    return _ask(confirmation_prompt(result.count))


def _confirm(result: ScrubResult) -> bool:
    return _ask(confirmation_prompt(result.count))


def cmd_scan(args: argparse.Namespace) -> int:
    """List secrets found in stdin as JSON, minus allow-listed values."""
    config = _build_config(args)
    found = [s for s in detect(sys.stdin.read(), config.sensitivity)
             if should_redact(s.value, config.allow_list, config.deny_list)]
    json.dump([s.to_dict(include_value=args.show_values) for s in found],
              sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    if args.fail_on_secrets and found:
        return 1
    return 0


def cmd_scrub(args: argparse.Namespace) -> int:
    """Scrub stdin and print the result."""
    config = _build_config(args)
    result = Scrubber(config).scrub(sys.stdin.read())

    if args.json:
        json.dump(result.to_dict(), sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
    else:
        sys.stdout.write(result.scrubbed_text)
    if config.show_diff and result.has_secrets:
        sys.stderr.write(unified_diff(result))
    if args.summary:
        sys.stderr.write(create_summary(result, show_values=False) + "\n")
    return 0


def cmd_copy(args: argparse.Namespace) -> int:
    """Run the copy gate on stdin; write to --output or stdout."""
    config = _build_config(args)
    text = sys.stdin.read()

    if args.output:
        target = Path(args.output)
        write = target.write_text
    else:
        write = sys.stdout.write

    if args.no_shield or not config.intercept_all_copy:
        outcome = copy_without_shield(text, write=write)
    else:
        outcome = copy_with_shield(text, config, write=write, review=_review, confirm=_confirm)
    sys.stderr.write(outcome.message + "\n")
    return 0 if outcome.copied else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="secret-shield",
        description="Detect and redact credentials in text",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="YAML settings file")
    parser.add_argument("--style", choices=[s.value for s in RedactionStyle], help="Redaction style")
    parser.add_argument("--sensitivity", choices=[s.value for s in Sensitivity], help="Detection tier")
    parser.add_argument("--allow", action="append", default=[], metavar="GLOB", help="Never redact values matching GLOB")
    parser.add_argument("--deny", action="append", default=[], metavar="GLOB", help="Always redact values matching GLOB")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p_scan = sub.add_parser("scan", help="List detected secrets not covered by --allow (JSON)")
    p_scan.add_argument("--show-values", action="store_true", help="Include secret values in output")
    p_scan.add_argument("--fail-on-secrets", action="store_true", help="Exit 1 if anything is found")

    p_scrub = sub.add_parser("scrub", help="Print scrubbed text")
    p_scrub.add_argument("--json", action="store_true", help="Emit the full result as JSON")
    p_scrub.add_argument("--diff", action="store_true", help="Print a unified diff to stderr")
    p_scrub.add_argument("--summary", action="store_true", help="Print a summary to stderr")

    p_copy = sub.add_parser("copy", help="Scrub, review, then write")
    p_copy.add_argument("--output", help="Write here instead of stdout")
    p_copy.add_argument("--diff", action="store_true", help="Show a diff before writing")
    p_copy.add_argument("--confirm", action="store_true", help="Ask before writing")
    p_copy.add_argument("--no-shield", action="store_true", help="Write the text untouched")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cmds = {
        "scan": cmd_scan,
        "scrub": cmd_scrub,
        "copy": cmd_copy,
    }
    try:
        return cmds[args.command](args)
    except (InvalidConfiguration, FileNotFoundError) as e:
        sys.stderr.write(f"secret-shield: {e}\n")
        return 2


if __name__ == "__main__":
    sys.exit(main())
