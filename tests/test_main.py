import string

import pytest

from pwgauge.main import main as pwgauge_main, Config
from pwgauge.charclass import ALL_CLASSES, parse_classes
from pwgauge.fileformat import parse_file
from pwgauge import pwgen, ui


@pytest.fixture()
def config_file(tmp_path):
    return tmp_path / 'pwgauge.conf'


def test_gen(capsys, config_file):
    assert pwgauge_main(["gen", "--config", str(config_file),
                         "-n", "5", "-l", "20", "-c", "ld"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    for line in lines:
        assert len(line) == 20
        assert all(c in string.ascii_lowercase + string.digits for c in line)
        assert any(c.isdigit() for c in line)
        assert any(c.islower() for c in line)


def test_gen_defaults(capsys, config_file):
    assert pwgauge_main(["gen", "--config", str(config_file)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 10
    assert all(len(line) == pwgen.MIN_LENGTH for line in lines)


def test_gen_entropy(capsys, config_file):
    assert pwgauge_main(["gen", "--config", str(config_file),
                         "-n", "2", "-l", "20", "-c", "ud", "-e"]) == 0
    for line in capsys.readouterr().out.splitlines():
        password, bits, strength = line.split('   ')
        assert len(password) == 20
        assert bits == '103.40 bits'
        assert strength == 'Strong'


def test_gen_output(capsys, config_file, tmp_path):
    output_file = tmp_path / 'out.txt'
    assert pwgauge_main(["gen", "--config", str(config_file),
                         "-n", "3", "-l", "8", "-c", "s", "-o", str(output_file)]) == 0
    printed = capsys.readouterr().out.splitlines()
    entries = parse_file(output_file.read_text(encoding='utf-8'))
    assert [e.password for e in entries] == printed
    assert all(e.strength == 'Medium' for e in entries)  # 8 * log2(26) = 37.60


def test_gen_output_error(capsys, config_file, tmp_path):
    output_file = tmp_path / 'missing' / 'out.txt'
    assert pwgauge_main(["gen", "--config", str(config_file),
                         "-n", "1", "-o", str(output_file)]) == 1
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert out[1].startswith("Error saving password: ")


@pytest.mark.parametrize("args,message", [
    (["-l", "3"], "Error: length must be >= number of selected classes\n"),
    (["-l", "0", "-c", "u"], "Error: length must be >= 1\n"),
    (["-c", ""], "Error: no character type selected\n"),
    (["-c", "ulx"], "Error: Unknown character class 'x' (use some of 'ulds')\n"),
])
def test_gen_invalid(capsys, config_file, args, message):
    assert pwgauge_main(["gen", "--config", str(config_file)] + args) == 1
    assert capsys.readouterr().out == message


def test_entropy(capsys, config_file):
    assert pwgauge_main(["entropy", "--config", str(config_file),
                         "-l", "12", "-c", "du"]) == 0
    assert capsys.readouterr().out == ("Length:   12\n"
                                       "Classes:  ud\n"
                                       "Entropy:  62.04 bits\n"
                                       "Strength: Strong\n")


def test_entropy_invalid(capsys, config_file):
    assert pwgauge_main(["entropy", "--config", str(config_file), "-c", ""]) == 1
    assert capsys.readouterr().out == "Error: no character type selected\n"


def test_config(capsys, config_file):
    config_file.write_text("[pwgauge]\n"
                           "length = 24\n"
                           "classes = sl\n"
                           "output = ~/saved.txt\n"
                           "colour = blue\n"
                           "[other]\n"
                           "x = 1\n", encoding='utf-8')
    cfg = Config(config_file)
    out = capsys.readouterr().out
    assert f"WARNING: unknown key ['pwgauge'] 'colour' in config {str(config_file)!r}\n" in out
    assert f"WARNING: unknown section 'other' in config {str(config_file)!r}\n" in out
    assert cfg.length() == 24
    assert cfg.length(8) == 8
    assert cfg.classes() == parse_classes('ls')
    assert cfg.classes('ud') == parse_classes('ud')
    assert cfg.output_file().name == 'saved.txt'
    assert '~' not in str(cfg.output_file())
    assert str(cfg.output_file('x.txt')) == 'x.txt'


def test_config_missing(capsys, config_file):
    cfg = Config(config_file, verbose=True)
    assert capsys.readouterr().out == f"Loading config {str(config_file)!r}...\n"
    assert cfg.length() == pwgen.MIN_LENGTH
    assert cfg.classes() is None
    assert cfg.output_file() == ui.DEFAULT_OUTPUT


def test_config_invalid_length(config_file):
    config_file.write_text("[pwgauge]\nlength = long\n", encoding='utf-8')
    with pytest.raises(ValueError, match="Invalid value for 'length'"):
        Config(config_file)


def test_gen_uses_config(capsys, config_file):
    config_file.write_text("[pwgauge]\nlength = 6\nclasses = d\n", encoding='utf-8')
    assert pwgauge_main(["gen", "--config", str(config_file), "-n", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(len(line) == 6 and line.isdigit() for line in lines)


def test_default_classes():
    assert pwgen.DEFAULT_CLASSES == ALL_CLASSES


@pytest.mark.parametrize("count", ["0", "-3"])
def test_gen_invalid_count(capsys, config_file, tmp_path, count):
    output_file = tmp_path / 'out.txt'
    assert pwgauge_main(["gen", "--config", str(config_file),
                         "-n", count, "-o", str(output_file)]) == 1
    assert capsys.readouterr().out == "Error: count must be >= 1\n"
    assert not output_file.exists()


def test_config_zero_length(capsys, config_file):
    config_file.write_text("[pwgauge]\nlength = 0\n", encoding='utf-8')
    assert Config(config_file).length() == 0
    assert pwgauge_main(["gen", "--config", str(config_file), "-n", "1"]) == 1
    assert capsys.readouterr().out == "Error: length must be >= 1\n"
