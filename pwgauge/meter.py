# Meter
# (console strength meter)
#

from blessed import Terminal

from .entropy import Strength, strength_label

METER_CELLS = 10
BITS_PER_CELL = 12.8

COMMENTS = {
    Strength.VERY_WEAK: ('bright_red', "Very weak - easily cracked"),
    Strength.WEAK: ('red', "Weak - vulnerable to attacks"),
    Strength.MEDIUM: ('yellow', "Medium - acceptable for most uses"),
    Strength.STRONG: ('green', "Strong - secure password"),
    Strength.VERY_STRONG: ('bright_green', "Very strong - excellent security"),
}


def meter_bar(bits: float) -> str:
    """Bar of `METER_CELLS` cells, one full cell per `BITS_PER_CELL` bits."""
    full = min(int(bits / BITS_PER_CELL), METER_CELLS)
    return '[' + '#' * full + '.' * (METER_CELLS - full) + ']'


def format_meter(bits: float, term=None) -> str:
    """Format the meter as multi-line text (ends with newline)."""
    term = term or Terminal()
    strength = strength_label(bits)
    color, comment = COMMENTS[strength]
    paint = getattr(term, color)
    return (f"{term.bold('PASSWORD STRENGTH METER')}\n"
            f"  Entropy:  {bits:.2f} bits\n"
            f"  Strength: {paint(str(strength))}\n"
            f"  {paint(meter_bar(bits))}\n"
            f"  {comment}\n")
