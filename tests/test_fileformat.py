import pytest

from pwgauge.fileformat import format_entry, format_file, parse_file, append_file, DELIMITER
from pwgauge.history import HistoryEntry
from pwgauge.entropy import Strength

entry1 = HistoryEntry('Ab3$xyz', 45.2, Strength.MEDIUM, timestamp='2024-05-06 07:08:09')
entry2 = HistoryEntry('a: b', 13.2877, Strength.VERY_WEAK, timestamp='2024-05-06 07:08:10')

block1 = """\
========================================
Generated: 2024-05-06 07:08:09
Password: Ab3$xyz
Entropy: 45.20 bits
Strength: Medium
========================================

"""


def test_format_entry():
    assert format_entry(entry1) == block1


def test_format_parse_file():
    data = format_file([entry1, entry2])
    assert data.startswith(block1)
    entries = parse_file(data)
    assert len(entries) == 2
    assert entries[0] == HistoryEntry('Ab3$xyz', 45.2, 'Medium', '2024-05-06 07:08:09')
    assert entries[1].password == 'a: b'
    assert entries[1].entropy == 13.29


def test_append_file(tmp_path):
    filename = tmp_path / 'passwords.txt'
    assert append_file(filename, [entry1]) == 1
    assert append_file(filename, [entry2]) == 1
    assert filename.read_text(encoding='utf-8') == format_file([entry1, entry2])


def test_append_file_error(tmp_path):
    with pytest.raises(OSError):
        append_file(tmp_path / 'no' / 'such' / 'dir.txt', [entry1])


@pytest.mark.parametrize("data,message", [
    (block1.replace("Strength: Medium\n", ""), "line 5: block is missing Strength"),
    (block1.replace("Password: Ab3$xyz", "Password Ab3$xyz"),
     "line 3: expected 'Key: value', got 'Password Ab3\\$xyz'"),
    (block1.replace("Strength:", "Colour:"), "line 5: unknown key 'Colour'"),
    (block1.replace("45.20 bits", "many bits"), "line 6: invalid entropy 'many bits'"),
    ("hello\n" + block1, "line 1: text outside of block: 'hello'"),
    (block1.rsplit(DELIMITER, 1)[0], "unterminated block"),
])
def test_parse_malformed(data, message):
    with pytest.raises(ValueError, match=message):
        parse_file(data)
