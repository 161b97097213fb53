"""Password generation and strength classification.

Both operations share the four fixed character classes from
:mod:`password_policy.charsets`. Generated passwords always contain one
character of every class; a password is strong when it has at least
``MIN_STRONG_LENGTH`` characters and every class is represented.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import asdict, dataclass, field
from typing import Any

from .charsets import ALL_CHARACTERS, CHARACTER_CLASSES, class_of


LOGGER = logging.getLogger(__name__)

DEFAULT_LENGTH = 12
MIN_GENERATED_LENGTH = len(CHARACTER_CLASSES)
MIN_STRONG_LENGTH = 8

_REQUIREMENT_LABELS = {
    "uppercase": "at least one uppercase letter",
    "lowercase": "at least one lowercase letter",
    "digit": "at least one digit",
    "special": "at least one special character (!@#$%^&*())",
}

# Stateless wrapper over os.urandom; shared across threads.
_RANDOM = secrets.SystemRandom()


class InvalidArgumentError(ValueError):
    pass


@dataclass
class PasswordAssessment:
    length: int
    min_length: int = MIN_STRONG_LENGTH
    missing_classes: list[str] = field(default_factory=list)

    @property
    def long_enough(self) -> bool:
        return self.length >= self.min_length

    @property
    def is_strong(self) -> bool:
        return self.long_enough and not self.missing_classes

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["long_enough"] = self.long_enough
        payload["is_strong"] = self.is_strong
        return payload


def generate_password(length: int = DEFAULT_LENGTH) -> str:
    """Return a random password of ``length`` characters.

    One character is drawn from each character class, the remainder from
    the union of all classes, and the result is shuffled so the mandatory
    characters can land at any position.

    Raises:
        InvalidArgumentError: If ``length`` is not an integer or is below
            ``MIN_GENERATED_LENGTH``.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgumentError(f"password length must be an integer, got {length!r}")
    if length < MIN_GENERATED_LENGTH:
        raise InvalidArgumentError(
            f"password length must be at least {MIN_GENERATED_LENGTH} characters"
        )

    chars = [_RANDOM.choice(item.characters) for item in CHARACTER_CLASSES]
    chars.extend(_RANDOM.choice(ALL_CHARACTERS) for _ in range(length - len(chars)))
    _RANDOM.shuffle(chars)
    LOGGER.debug("Generated password of length %s", length)
    return "".join(chars)


def assess_password(password: str) -> PasswordAssessment:
    seen: set[str] = set()
    for char in password:
        matched = class_of(char)
        if matched is not None:
            seen.add(matched.name)
    missing = [item.name for item in CHARACTER_CLASSES if item.name not in seen]
    return PasswordAssessment(length=len(password), missing_classes=missing)


def is_strong_password(password: str) -> bool:
    if len(password) < MIN_STRONG_LENGTH:
        return False
    return assess_password(password).is_strong


def missing_requirements(password: str) -> list[str]:
    assessment = assess_password(password)
    messages: list[str] = []
    if not assessment.long_enough:
        messages.append(f"at least {assessment.min_length} characters")
    messages.extend(_REQUIREMENT_LABELS[name] for name in assessment.missing_classes)
    return messages
