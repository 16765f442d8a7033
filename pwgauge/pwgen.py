# pwgen
# (random password generator)
#

import logging
from random import SystemRandom

from .charclass import ALL_CLASSES, ordered, pool

random = SystemRandom()
log = logging.getLogger(__name__)

MIN_LENGTH = 16
DEFAULT_CLASSES = ALL_CLASSES


class InvalidRequest(ValueError):

    """Parameters of password request are not valid."""

    def __init__(self, reason):
        ValueError.__init__(self, reason)
        self.reason = reason


def check_request(length: int, classes) -> tuple:
    """Validate request, return the classes in definition order."""
    classes = ordered(classes)
    if not classes:
        raise InvalidRequest("no character type selected")
    if length < 1:
        raise InvalidRequest("length must be >= 1")
    if length < len(classes):
        raise InvalidRequest("length must be >= number of selected classes")
    return classes


def generate_password(length: int = MIN_LENGTH,
                      classes=DEFAULT_CLASSES) -> str:
    """Generate random password from selected character classes.

    At least one character of each class is always present.
    The rest is drawn from the pool of all selected classes.
    Positions of all characters are shuffled.

    :param length:  Exact length of the password
    :param classes: Set of :class:`CharacterClass`
    :returns: The password.
    :raises InvalidRequest: when the request cannot be satisfied

    """
    classes = check_request(length, classes)
    charlist = pool(classes)
    log.debug("pool size %d, %d extra draws", len(charlist), length - len(classes))
    chars = [random.choice(charlist) for _ in range(length - len(classes))]
    # One guaranteed char per class
    chars += [random.choice(c.alphabet) for c in classes]
    # SystemRandom.shuffle is Fisher-Yates with unbiased randbelow
    random.shuffle(chars)
    return ''.join(chars)


if __name__ == '__main__':
    for _ in range(10):
        print(generate_password())
