"""Pattern catalog: regexes for known credential formats.

Ordered by specificity: vendor-prefixed keys first, then structural
formats (JWTs, PEM blocks, connection URLs), then the broad key=value
shapes that only fire at lower sensitivity tiers.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass

from .types import SecretType, Sensitivity

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PatternDefinition:
    secret_type: SecretType
    pattern: re.Pattern
    description: str
    confidence: float      # how likely a match is a real secret


SECRET_PATTERNS: tuple[PatternDefinition, ...] = (
    # OpenAI
    PatternDefinition(SecretType.OPENAI_API_KEY, re.compile(
        r"sk-[a-zA-Z0-9]{48}"
    ), "OpenAI API Key", 0.95),
    PatternDefinition(SecretType.OPENAI_API_KEY, re.compile(
        r"sk-proj-[a-zA-Z0-9\-_]{48,}"
    ), "OpenAI Project API Key", 0.95),

    # GitHub: personal, OAuth, app
    PatternDefinition(SecretType.GITHUB_TOKEN, re.compile(
        r"ghp_[a-zA-Z0-9]{36}"
    ), "GitHub Personal Access Token", 0.95),
    PatternDefinition(SecretType.GITHUB_TOKEN, re.compile(
        r"gho_[a-zA-Z0-9]{36}"
    ), "GitHub OAuth Token", 0.95),
    PatternDefinition(SecretType.GITHUB_TOKEN, re.compile(
        r"ghs_[a-zA-Z0-9]{36}"
    ), "GitHub App Token", 0.95),

    # Stripe
    PatternDefinition(SecretType.STRIPE_KEY, re.compile(
        r"sk_live_[a-zA-Z0-9]{24,}"
    ), "Stripe Secret Key (Live)", 0.95),
    PatternDefinition(SecretType.STRIPE_KEY, re.compile(
        r"sk_test_[a-zA-Z0-9]{24,}"
    ), "Stripe Secret Key (Test)", 0.9),
    PatternDefinition(SecretType.STRIPE_KEY, re.compile(
        r"pk_live_[a-zA-Z0-9]{24,}"
    ), "Stripe Publishable Key (Live)", 0.8),

    # AWS
    PatternDefinition(SecretType.AWS_ACCESS_KEY, re.compile(
        r"AKIA[0-9A-Z]{16}"
    ), "AWS Access Key ID", 0.95),
    PatternDefinition(SecretType.AWS_SECRET_KEY, re.compile(
        r"(?:aws_secret_access_key|AWS_SECRET_ACCESS_KEY)[\s:=]+([a-zA-Z0-9+/]{40})"
    ), "AWS Secret Access Key", 0.95),

    # JWT: header and payload both start with base64url '{"'
    PatternDefinition(SecretType.JWT_TOKEN, re.compile(
        r"eyJ[a-zA-Z0-9_-]{10,}\.eyJ[a-zA-Z0-9_-]{10,}\.[a-zA-Z0-9_-]{10,}"
    ), "JWT Token", 0.9),

    # PEM private key blocks (non-greedy, spans lines)
    PatternDefinition(SecretType.PRIVATE_KEY, re.compile(
        r"-----BEGIN (?:RSA |EC |OPENSSH )?PRIVATE KEY-----"
        r"[\s\S]*?"
        r"-----END (?:RSA |EC |OPENSSH )?PRIVATE KEY-----"
    ), "Private Key", 1.0),

    # Connection strings with user:password@host
    PatternDefinition(SecretType.DATABASE_URL, re.compile(
        r"(?:postgres|postgresql|mysql|mongodb|redis)://[^\s\"']+:[^\s\"']+@[^\s\"']+",
        re.IGNORECASE,
    ), "Database Connection URL", 0.95),

    # Environment-style FOO_KEY="value"
    PatternDefinition(SecretType.GENERIC_API_KEY, re.compile(
        r"(?:API_KEY|ACCESS_KEY|[A-Z_]*_KEY)\s*[:=]\s*['\"]([a-zA-Z0-9_\-]{8,})['\"]?"
    ), "Environment Variable Key Pattern", 0.85),
    PatternDefinition(SecretType.GENERIC_API_KEY, re.compile(
        r"export\s+(?:API_KEY|ACCESS_KEY|[A-Z_]*_KEY)\s*=\s*['\"]?([a-zA-Z0-9_\-]{8,})['\"]?"
    ), "Exported Environment Variable Key", 0.85),

    # Generic labelled API keys (lower confidence)
    PatternDefinition(SecretType.GENERIC_API_KEY, re.compile(
        r"(?:api[_-]?key|apikey|api[_-]?secret|access[_-]?token)[\s:=]+['\"]?([a-zA-Z0-9_\-]{32,})['\"]?",
        re.IGNORECASE,
    ), "Generic API Key", 0.7),

    # Generic password/secret/token assignments (lowest confidence).
    # A quoted value may contain spaces; an unquoted one may not.
    PatternDefinition(SecretType.GENERIC_SECRET, re.compile(
        r"(?:password|passwd|pwd|secret|token)[\s:=]+"
        r"(?:([\"'])[^\"'\r\n]{12,}\1"
        r"|['\"]?[a-zA-Z0-9!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]{12,}['\"]?)",
        re.IGNORECASE,
    ), "Generic Secret", 0.6),
)

# Minimum confidence per tier
_THRESHOLDS: dict[Sensitivity, float] = {
    Sensitivity.STRICT: 0.0,
    Sensitivity.BALANCED: 0.8,
    Sensitivity.LENIENT: 0.9,
}

_RANK: dict[str, int] = {p.description: i for i, p in enumerate(SECRET_PATTERNS)}


def parse_sensitivity(value: Sensitivity | str | None) -> Sensitivity:
    """Coerce a setting to a Sensitivity; unknown values fall back to balanced."""
    if isinstance(value, Sensitivity):
        return value
    if value is None:
        return Sensitivity.BALANCED
    try:
        return Sensitivity(str(value).strip().lower())
    except ValueError:
        logger.warning("Unknown sensitivity %r, falling back to %s", value, Sensitivity.BALANCED.value)
        return Sensitivity.BALANCED


def patterns_for(sensitivity: Sensitivity | str) -> list[PatternDefinition]:
    """Return the catalog entries active at this sensitivity, in catalog order."""
    threshold = _THRESHOLDS[parse_sensitivity(sensitivity)]
    return [p for p in SECRET_PATTERNS if p.confidence >= threshold]


def catalog_rank(description: str) -> int:
    """Position of a pattern in the catalog (unknown descriptions sort last)."""
    return _RANK.get(description, len(SECRET_PATTERNS))
