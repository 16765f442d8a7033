# format, parse
# (text file with saved passwords)
#

import io
import logging

from .history import HistoryEntry

log = logging.getLogger(__name__)

DELIMITER = '=' * 40


def format_entry(entry: HistoryEntry) -> str:
    """Format one entry as a delimited block, followed by blank line."""
    return (f"{DELIMITER}\n"
            f"Generated: {entry.timestamp}\n"
            f"Password: {entry.password}\n"
            f"Entropy: {entry.entropy:.2f} bits\n"
            f"Strength: {entry.strength}\n"
            f"{DELIMITER}\n"
            f"\n")


def write_file(stream, entries):
    """Write entries into text stream."""
    for entry in entries:
        stream.write(format_entry(entry))


def format_file(entries) -> str:
    """Format entries into string."""
    stream = io.StringIO()
    write_file(stream, entries)
    return stream.getvalue()


def append_file(filename, entries) -> int:
    """Append entries to file `filename`, creating it when missing.

    Returns number of written entries.
    OSError is propagated to caller.

    """
    entries = list(entries)
    with open(filename, 'a', encoding='utf-8') as f:
        write_file(f, entries)
    log.debug("appended %d entries to %s", len(entries), filename)
    return len(entries)


FIELDS = ('Generated', 'Password', 'Entropy', 'Strength')


def _parse_entry(fields: dict, lineno: int) -> HistoryEntry:
    missing = [key for key in FIELDS if key not in fields]
    if missing:
        raise ValueError(f"line {lineno}: block is missing {', '.join(missing)}")
    try:
        entropy = float(fields['Entropy'].split()[0])
    except (ValueError, IndexError):
        raise ValueError(f"line {lineno}: invalid entropy {fields['Entropy']!r}") from None
    return HistoryEntry(password=fields['Password'],
                        entropy=entropy,
                        strength=fields['Strength'],
                        timestamp=fields['Generated'])


def read_file(stream) -> list:
    """Read entries from text stream.

    Strength is returned as plain string, entropy as float
    rounded to two decimals (as written).

    :raises ValueError: on malformed block (with line number)

    """
    entries = []
    fields = None
    lineno = 0
    for lineno, line in enumerate(stream, 1):
        line = line.rstrip('\n')
        if line == DELIMITER:
            if fields is None:
                fields = {}
                continue
            entries.append(_parse_entry(fields, lineno))
            fields = None
        elif fields is not None:
            try:
                key, value = line.split(': ', 1)
            except ValueError:
                raise ValueError(f"line {lineno}: expected 'Key: value', got {line!r}") from None
            if key not in FIELDS:
                raise ValueError(f"line {lineno}: unknown key {key!r}")
            fields[key] = value
        elif line:
            raise ValueError(f"line {lineno}: text outside of block: {line!r}")
    if fields is not None:
        raise ValueError(f"line {lineno}: unterminated block")
    return entries


def parse_file(data: str) -> list:
    """Parse whole file from string."""
    stream = io.StringIO(data)
    return read_file(stream)
