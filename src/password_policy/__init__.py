"""Generate random passwords and check them against a four-class strength policy."""

from .charsets import ALL_CHARACTERS, CHARACTER_CLASSES, DIGITS, LOWERCASE, SPECIAL, UPPERCASE, CharacterClass
from .passwords import (
    InvalidArgumentError,
    PasswordAssessment,
    assess_password,
    generate_password,
    is_strong_password,
    missing_requirements,
)

__version__ = "0.1.0"

__all__ = [
    "ALL_CHARACTERS",
    "CHARACTER_CLASSES",
    "CharacterClass",
    "DIGITS",
    "InvalidArgumentError",
    "LOWERCASE",
    "PasswordAssessment",
    "SPECIAL",
    "UPPERCASE",
    "assess_password",
    "generate_password",
    "is_strong_password",
    "missing_requirements",
]
