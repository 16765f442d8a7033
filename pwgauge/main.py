import argparse
import configparser
import logging
from pathlib import Path

from . import pwgen, shell, ui
from .charclass import parse_classes, format_classes
from .entropy import score
from .fileformat import append_file
from .history import History

log = logging.getLogger(__name__)


class Config:

    def __init__(self, config_file, verbose=False):
        self._length = None
        self._classes = None
        self._output = None
        self.load(config_file, verbose)

    def load(self, config_file, verbose=False):
        config_file = Path(config_file).expanduser()
        if verbose:
            print(f'Loading config {str(config_file)!r}...')
        config = configparser.ConfigParser()
        config.read(config_file, encoding='utf-8')
        for section in config.sections():
            if section != 'pwgauge':
                print(f"WARNING: unknown section {section!r} in config {str(config_file)!r}")
                continue
            section = config[section]
            for key in section:
                if key == 'length':
                    try:
                        self._length = section.getint(key)
                    except ValueError:
                        raise ValueError(f"Invalid value for 'length' in config "
                                         f"{str(config_file)!r}: {section[key]!r}") from None
                elif key == 'classes':
                    self._classes = parse_classes(section[key])
                elif key == 'output':
                    self._output = Path(section[key]).expanduser()
                else:
                    print(f"WARNING: unknown key [{section.name!r}] {key!r} in config {str(config_file)!r}")
                    continue
        log.debug("config: length=%r classes=%r output=%r",
                  self._length, self._classes, self._output)

    def length(self, override=None) -> int:
        if override is not None:
            return override
        if self._length is not None:
            return self._length
        return pwgen.MIN_LENGTH

    def classes(self, override=None):
        """Configured classes, or None if not configured."""
        if override is not None:
            return parse_classes(override)
        return self._classes

    def output_file(self, override=None) -> Path:
        if override is not None:
            return Path(override)
        return self._output or ui.DEFAULT_OUTPUT


def run_shell(config_file, output_file):
    cfg = Config(config_file, verbose=True)
    shell_ui = shell.ShellUI(cfg.output_file(output_file),
                             length=cfg.length(),
                             classes=cfg.classes())
    shell_ui.start()


def run_gen(config_file, output_file, count, length, classes, show_entropy):
    cfg = Config(config_file)
    length = cfg.length(length)
    classes = cfg.classes(classes)
    if classes is None:
        classes = pwgen.DEFAULT_CLASSES
    if count < 1:
        raise ValueError("count must be >= 1")
    bits, strength = score(length, classes)
    history = History()
    for _ in range(count):
        password = pwgen.generate_password(length, classes)
        history.record(password, bits, strength)
        if show_entropy:
            print(password, '%.2f bits' % bits, strength, sep='   ')
        else:
            print(password)
    if output_file is not None:
        try:
            append_file(cfg.output_file(output_file), history.list())
        except OSError as e:
            print("Error saving password:", e)
            return 1


def run_entropy(config_file, length, classes):
    cfg = Config(config_file)
    length = cfg.length(length)
    classes = cfg.classes(classes)
    if classes is None:
        classes = pwgen.DEFAULT_CLASSES
    bits, strength = score(length, classes)
    print("Length:   %d" % length)
    print("Classes:  %s" % format_classes(classes))
    print("Entropy:  %.2f bits" % bits)
    print("Strength: %s" % strength)


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="pwgauge",
                                 description="Password generator with strength meter",
                                 formatter_class=argparse.RawTextHelpFormatter)
    ap.add_argument('--debug', action='store_true',
                    help="print debug messages")

    # Sub-commands
    sp = ap.add_subparsers()
    ap_shell = sp.add_parser("shell", aliases=['sh'],
                             help="start shell (default)")
    ap_shell.set_defaults(func=run_shell)
    ap_gen = sp.add_parser("gen", aliases=['pwgen'],
                           help="generate some random passwords")
    ap_gen.set_defaults(func=run_gen)
    ap_entropy = sp.add_parser("entropy",
                               help="print entropy and strength for given parameters")
    ap_entropy.set_defaults(func=run_entropy)

    for subparser in (ap_shell, ap_gen, ap_entropy):
        subparser.add_argument('--config', dest='config_file',
                               default=ui.DATA_DIR / 'pwgauge.conf',
                               help="config file (default: %(default)s)")
    for subparser in (ap_gen, ap_entropy):
        subparser.add_argument('-l', dest='length', type=int,
                               help=f"length of password (default: {pwgen.MIN_LENGTH})")
        subparser.add_argument('-c', dest='classes', type=str,
                               help="character classes: u=upper, l=lower, d=digits, "
                                    "s=special (default: ulds)")

    ap_shell.add_argument('-o', '--output', dest='output_file',
                          help=f"file for saved passwords (default: {ui.DEFAULT_OUTPUT})")
    ap_gen.add_argument('-o', '--output', dest='output_file',
                        help="also append the passwords to this file")
    ap_gen.add_argument('-n', dest='count', type=int, default=10,
                        help="number of passwords (default: %(default)s)")
    ap_gen.add_argument('-e', '--entropy', dest='show_entropy', action='store_true',
                        help="print entropy and strength with each password")

    args = ap.parse_args(args=argv)

    if 'func' not in args:
        ap_shell.parse_args(args=[], namespace=args)

    return args


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: Exit status
    """
    args = parse_args(argv)
    if args.debug:
        logging.basicConfig(level='DEBUG')
    delattr(args, 'debug')
    run_func = args.func
    delattr(args, 'func')
    try:
        return run_func(**vars(args)) or 0
    except ValueError as e:
        print("Error:", e)
        return 1
