# entropy, strength
# (password strength estimation)
#

import enum
import math

from .charclass import pool_size
from .pwgen import check_request


class Strength(enum.Enum):
    VERY_WEAK = 'Very Weak'
    WEAK = 'Weak'
    MEDIUM = 'Medium'
    STRONG = 'Strong'
    VERY_STRONG = 'Very Strong'

    def __str__(self):
        return self.value


# Upper bounds (exclusive), ascending
THRESHOLDS = (
    (28, Strength.VERY_WEAK),
    (36, Strength.WEAK),
    (60, Strength.MEDIUM),
    (128, Strength.STRONG),
)


def entropy(length: int, classes) -> float:
    """Entropy in bits of a password generated with these parameters.

    Models the password as a uniform draw of `length` characters
    from the whole pool, i.e. ``length * log2(pool_size)``.
    The guaranteed-character rule of the generator is not accounted for,
    so the result is slightly higher than the exact value.

    """
    classes = check_request(length, classes)
    return length * math.log2(pool_size(classes))


def strength_label(bits: float) -> Strength:
    """Map entropy to :class:`Strength`.

    A value exactly at a threshold belongs to the stronger band.

    """
    for upper, strength in THRESHOLDS:
        if bits < upper:
            return strength
    return Strength.VERY_STRONG


def score(length: int, classes) -> tuple:
    """Return (bits, strength) for the parameters."""
    bits = entropy(length, classes)
    return bits, strength_label(bits)
