# History
# (passwords generated in current session)
#

import time


class HistoryEntry:

    """Generated password with its score and creation time."""

    def __init__(self, password: str, entropy: float, strength, timestamp=None):
        self.password = password
        self.entropy = entropy
        self.strength = strength
        self.timestamp = timestamp or time.strftime('%F %T')

    def __repr__(self):
        return "{}(password={!r}, entropy={!r}, strength={!r}, timestamp={!r})".format(
            self.__class__.__name__, self.password, self.entropy,
            str(self.strength), self.timestamp)

    def __str__(self):
        return "[%s] %s | Entropy: %.2f bits | Strength: %s" \
               % (self.timestamp, self.password, self.entropy, self.strength)

    def __eq__(self, other):
        if not isinstance(other, HistoryEntry):
            return NotImplemented
        return (self.password, self.entropy, str(self.strength), self.timestamp) \
            == (other.password, other.entropy, str(other.strength), other.timestamp)


class History:

    """Append-only list of entries, owned by one session.

    Nothing is persisted. Entries are kept in insertion order,
    there is no deduplication and no capacity limit.

    """

    def __init__(self):
        self._entries = []

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def record(self, password: str, entropy: float, strength) -> HistoryEntry:
        entry = HistoryEntry(password, entropy, strength)
        self._entries.append(entry)
        return entry

    def list(self) -> tuple:
        return tuple(self._entries)

    def clear(self):
        self._entries.clear()
