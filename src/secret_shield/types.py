"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class SecretType(str, Enum):
    """Kinds of credentials the catalog knows about."""
    OPENAI_API_KEY = "openai_api_key"
    GITHUB_TOKEN = "github_token"
    STRIPE_KEY = "stripe_key"
    AWS_ACCESS_KEY = "aws_access_key"
    AWS_SECRET_KEY = "aws_secret_key"
    JWT_TOKEN = "jwt_token"
    PRIVATE_KEY = "private_key"
    DATABASE_URL = "database_url"
    GENERIC_API_KEY = "generic_api_key"
    GENERIC_SECRET = "generic_secret"


class RedactionStyle(str, Enum):
    PARTIAL = "partial"           # sk-****...****
    FULL = "full"                 # [REDACTED]
    PLACEHOLDER = "placeholder"   # <YOUR_API_KEY_HERE>
    LABELED = "labeled"           # [OPENAI_API_KEY]


class Sensitivity(str, Enum):
    STRICT = "strict"       # every pattern
    BALANCED = "balanced"   # confidence >= 0.8
    LENIENT = "lenient"     # confidence >= 0.9


class InvalidConfiguration(ValueError):
    """Raised when settings cannot be turned into a ShieldConfig."""


@dataclass(frozen=True, slots=True)
class DetectedSecret:
    """A single secret occurrence in the scanned text."""
    secret_type: SecretType
    value: str
    start: int             # half-open [start, end) in the original text
    end: int
    confidence: float      # 0.0–1.0
    context: str | None = None    # variable/key name before the match
    description: str = ""         # catalog pattern that produced it

    def to_dict(self, *, include_value: bool = True) -> dict:
        out = {
            "type": self.secret_type.value,
            "start": self.start,
            "end": self.end,
            "confidence": self.confidence,
            "context": self.context,
            "description": self.description,
        }
        if include_value:
            out["value"] = self.value
        return out


@dataclass(frozen=True, slots=True)
class RedactionOutcome:
    """One applied redaction; offsets refer to the original text."""
    original: str
    redacted: str
    secret_type: SecretType
    start: int
    end: int

    def to_dict(self) -> dict:
        return {
            "type": self.secret_type.value,
            "original": self.original,
            "redacted": self.redacted,
            "start": self.start,
            "end": self.end,
        }


@dataclass(frozen=True, slots=True)
class ScrubResult:
    """Result of scrubbing a text."""
    original_text: str
    scrubbed_text: str
    redactions: tuple[RedactionOutcome, ...] = field(default_factory=tuple)
    has_secrets: bool = False

    @property
    def count(self) -> int:
        return len(self.redactions)

    def to_dict(self) -> dict:
        return {
            "original_text": self.original_text,
            "scrubbed_text": self.scrubbed_text,
            "redactions": [r.to_dict() for r in self.redactions],
            "has_secrets": self.has_secrets,
        }
