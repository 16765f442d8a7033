# BaseUI
# (basic commands)
#

from pathlib import Path

import pyperclip

from .charclass import CharacterClass, parse_classes, format_classes
from .pwgen import generate_password, MIN_LENGTH
from .entropy import score
from .history import History
from .meter import format_meter
from .fileformat import append_file

DATA_DIR = Path('~/.pwgauge')
DEFAULT_OUTPUT = Path('passwords.txt')


class BaseUI:

    #################
    # Other Utility #
    #################

    def _copy(self, text):
        """Wraps copy-to-clipboard function to allow overriding."""
        pyperclip.copy(text)

    def _input(self, prompt):
        """Wraps input function to allow overriding."""
        return input(prompt)

    def _ask_yesno(self, prompt) -> bool:
        """Ask `prompt` [y/n], return answer as bool"""
        ans = self._input(prompt + " [y/n] ")
        return len(ans) > 0 and ans.lower()[0] == 'y'


class GeneratorUI(BaseUI):

    """UI base commands.

    Owns one :class:`History`, which lives as long as the UI object.
    Commands never raise on bad user input, they print an error
    and return.

    """

    def __init__(self, output_file=None, length=None, classes=None):
        self._output_file = Path(output_file or DEFAULT_OUTPUT)
        self._default_length = MIN_LENGTH if length is None else length
        self._default_classes = classes
        self._history = History()

    @property
    def history(self):
        return self._history

    @property
    def output_file(self):
        return self._output_file

    ###############
    # UI Commands #
    ###############

    def cmd_generate(self, length=None, classes=None):
        """Generate new password

        Missing `length` and `classes` are asked for.
        Format of `classes` is a combination of letters
        u (upper), l (lower), d (digits), s (special), e.g. ``uld``.

        """
        try:
            length, classes = self._ask_request(length, classes)
            password = generate_password(length, classes)
            bits, strength = score(length, classes)
        except ValueError as e:
            return print("Error:", e)
        print("Generated password:", password)
        print(format_meter(bits), end='')
        entry = self._history.record(password, bits, strength)
        if self._ask_yesno("Save this password to file?"):
            self._save([entry])

    def cmd_multiple(self, count=None, length=None, classes=None):
        """Generate more passwords with same parameters"""
        try:
            count = self._parse_int(count or self._input('Count: '), 'count')
            if count < 1:
                raise ValueError("count must be >= 1")
            length, classes = self._ask_request(length, classes)
            bits, strength = score(length, classes)
            passwords = [generate_password(length, classes) for _ in range(count)]
        except ValueError as e:
            return print("Error:", e)
        print("Generated passwords:")
        entries = []
        for n, password in enumerate(passwords, 1):
            print("%d. %s" % (n, password))
            entries.append(self._history.record(password, bits, strength))
        print(format_meter(bits), end='')
        if self._ask_yesno("Save all passwords to file?"):
            self._save(entries)

    def cmd_history(self):
        """Print passwords generated in this session"""
        if not len(self._history):
            return print("No passwords in history yet.")
        for n, entry in enumerate(self._history.list(), 1):
            print("%d. %s" % (n, entry))

    def cmd_clear(self):
        """Clear the history"""
        self._history.clear()
        print("History cleared.")

    def cmd_save(self):
        """Append all passwords from history to output file"""
        if not len(self._history):
            return print("No passwords in history yet.")
        self._save(self._history.list())

    def cmd_copy(self, number=None):
        """Copy password from history to clipboard

        Copies the last generated password by default.

        """
        if not len(self._history):
            return print("No passwords in history yet.")
        try:
            index = -1
            if number is not None:
                index = self._parse_int(number, 'number') - 1
                if index < 0:
                    raise IndexError
            entry = self._history[index]
        except IndexError:
            return print("Not found.")
        except ValueError as e:
            return print("Error:", e)
        try:
            self._copy(entry.password)
        except pyperclip.PyperclipException as e:
            print("Error:", e)

    #################
    # Other Utility #
    #################

    def _ask_request(self, length=None, classes=None) -> tuple:
        """Complete the request by asking for missing parameters."""
        if length is None:
            length = self._input('Length [%d]: ' % self._default_length) \
                     or self._default_length
        length = self._parse_int(length, 'length')
        if classes is None and self._default_classes is not None:
            classes = format_classes(self._default_classes)
        if classes is None:
            classes = frozenset(
                c for c in CharacterClass
                if self._ask_yesno("Include %s?" % c.title))
        else:
            classes = parse_classes(classes)
        return length, classes

    @staticmethod
    def _parse_int(value, name) -> int:
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{name} must be a number: {value!r}") from None

    def _save(self, entries):
        try:
            written = append_file(self._output_file, entries)
        except OSError as e:
            return print("Error saving password:", e)
        print("Saved %d password(s) to %r." % (written, str(self._output_file)))
