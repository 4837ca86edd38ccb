"""Secret Shield: detect and redact credentials before text leaves your hands."""

from .scrubber import Scrubber, ShieldConfig, scrub
from .detector import detect, resolve_overlaps
from .patterns import PatternDefinition, SECRET_PATTERNS, patterns_for
from .policy import should_redact
from .masks import redact_secret
from .shield import CopyOutcome, copy_with_shield, copy_without_shield
from .config import load_config, load_from_yaml
from .types import (
    DetectedSecret, InvalidConfiguration, RedactionOutcome,
    RedactionStyle, ScrubResult, SecretType, Sensitivity,
)

__all__ = [
    "Scrubber", "ShieldConfig", "scrub",
    "detect", "resolve_overlaps",
    "PatternDefinition", "SECRET_PATTERNS", "patterns_for",
    "should_redact",
    "redact_secret",
    "CopyOutcome", "copy_with_shield", "copy_without_shield",
    "load_config", "load_from_yaml",
    "DetectedSecret", "InvalidConfiguration", "RedactionOutcome",
    "RedactionStyle", "ScrubResult", "SecretType", "Sensitivity",
]
__version__ = "0.1.0"
