# CharacterClass
# (built-in character classes and the pool)
#

import enum
import string

SPECIAL_CHARS = '!@#$%^&*()-_=+[]{}|;:,.<>?'


class CharacterClass(enum.Enum):

    """Character classes in definition order.

    Each member has a short letter (used on command line and in config)
    and a fixed, ordered alphabet.

    """

    UPPER = ('u', string.ascii_uppercase)
    LOWER = ('l', string.ascii_lowercase)
    DIGIT = ('d', string.digits)
    SPECIAL = ('s', SPECIAL_CHARS)

    def __init__(self, letter, alphabet):
        self.letter = letter
        self.alphabet = alphabet

    @property
    def title(self):
        return {
            CharacterClass.UPPER: 'uppercase letters',
            CharacterClass.LOWER: 'lowercase letters',
            CharacterClass.DIGIT: 'digits',
            CharacterClass.SPECIAL: 'special characters',
        }[self]


ALL_CLASSES = frozenset(CharacterClass)


def ordered(classes) -> tuple:
    """Return `classes` as a tuple in definition order, without duplicates."""
    selected = set(classes)
    return tuple(c for c in CharacterClass if c in selected)


def pool(classes) -> str:
    """Concatenate alphabets of `classes` (in definition order)."""
    return ''.join(c.alphabet for c in ordered(classes))


def pool_size(classes) -> int:
    return sum(len(c.alphabet) for c in ordered(classes))


def parse_classes(text: str) -> frozenset:
    """Parse compact form, e.g. 'ulds' or 'ud'.

    Letters are case-insensitive, repeated letters are allowed.
    Empty text gives empty set.

    """
    by_letter = {c.letter: c for c in CharacterClass}
    classes = set()
    for ch in text.strip().lower():
        try:
            classes.add(by_letter[ch])
        except KeyError:
            raise ValueError(f"Unknown character class {ch!r} "
                             f"(use some of {''.join(by_letter)!r})") from None
    return frozenset(classes)


def format_classes(classes) -> str:
    """Inverse of `parse_classes`."""
    return ''.join(c.letter for c in ordered(classes))
