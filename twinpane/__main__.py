"""
Entry point for twinpane.
"""
import argparse
import curses
import locale
import logging
import os
import sys

from . import __version__
from .core.app import TwinpaneApp
from .core.config import load_config, resolve_start_path
from .core.errors import DirectoryError


def configure_logging():
    """Enable debug logging when TWINPANE_DEBUG is set (to TWINPANE_LOG_FILE if given)."""
    if not os.environ.get('TWINPANE_DEBUG'):
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format='[%(levelname)s] %(name)s: %(message)s',
        filename=os.environ.get('TWINPANE_LOG_FILE') or None,
    )


def build_parser():
    parser = argparse.ArgumentParser(prog='twinpane', description='Dual-pane terminal file browser.')
    parser.add_argument('path', nargs='?', help='Directory to start in (default: config start_path or home).')
    parser.add_argument('--config', help='Path to config.toml.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def run(argv=None):
    """Run twinpane and return process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging()
    try:
        locale.setlocale(locale.LC_ALL, '')
    except locale.Error:
        pass

    config = load_config(args.config)
    start_path = resolve_start_path(config, args.path)

    def main(stdscr):
        TwinpaneApp(stdscr, config, start_path).run()

    try:
        curses.wrapper(main)
        return 0
    except KeyboardInterrupt:
        return 130
    except DirectoryError as exc:
        print(exc.message, file=sys.stderr)
        return 1


def main_cli():
    """Console script entrypoint."""
    return run()


if __name__ == '__main__':
    raise SystemExit(main_cli())
