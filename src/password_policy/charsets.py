from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CharacterClass:
    name: str
    characters: str

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and char in self.characters


UPPERCASE = CharacterClass("uppercase", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
LOWERCASE = CharacterClass("lowercase", "abcdefghijklmnopqrstuvwxyz")
DIGITS = CharacterClass("digit", "0123456789")
SPECIAL = CharacterClass("special", "!@#$%^&*()")

CHARACTER_CLASSES = (UPPERCASE, LOWERCASE, DIGITS, SPECIAL)
ALL_CHARACTERS = "".join(item.characters for item in CHARACTER_CLASSES)


def class_of(char: str) -> CharacterClass | None:
    for item in CHARACTER_CLASSES:
        if char in item:
            return item
    return None
