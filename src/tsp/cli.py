# -*- coding: utf-8 -*-
import argparse
import sys
from . import __version__
from . import config as configuration
from .browser import SessionBrowser
from .fzf import ToolException
from .launcher import Launcher, LauncherException, SelectionCancelled
from .logger import Logger
from .tmux import TmuxException

OPEN_MODES = ['history', 'scan']
BROWSE_MODE = 'browse'


class ArgumentParser(argparse.ArgumentParser):
    """
    Argument parser failing silently with exit code 1 on unknown input
    """
    def error(self, message):
        self.exit(1)


def build_parser():
    parser = ArgumentParser(
        description='tsp: Open and browse tmux sessions with fzf',
        add_help=False)

    modes = parser.add_mutually_exclusive_group()
    modes.add_argument('-o', dest='mode', action='store_const',
                       const='history',
                       help='open a session in a directory from history'
                            ' (default)')
    modes.add_argument('-n', dest='mode', action='store_const',
                       const='scan',
                       help='open a session in a directory found by scanning'
                            ' the base directory')
    modes.add_argument('-t', dest='mode', action='store_const',
                       const=BROWSE_MODE,
                       help='browse sessions, windows and panes to switch,'
                            ' kill or rename')
    parser.set_defaults(mode='history')

    parser.add_argument('-c', '--config', type=str, default=None,
                        help='configuration file'
                             ' (default: {})'.format(
                                 configuration.default_path()))
    parser.add_argument('-d', '--debug', action='store_true',
                        help='print external commands before running them')
    parser.add_argument('-v', action='version',
                        version='%(prog)s {}'.format(__version__))
    return parser


def main(argv=None):
    """
    Start main program: Parse user arguments and take action
    """
    args = build_parser().parse_args(argv)
    log = Logger()

    try:
        config = configuration.load(args.config)
    except configuration.ConfigException as e:
        log.error('[red]ERROR: [reset]{} [white]{}'
                  .format(e.message, e.errors))
        sys.exit(2)

    Logger.debug_mode = args.debug or bool(config.get('debug'))

    try:
        run(config, args.mode)

    except SelectionCancelled as e:
        log.echo('[yellow]{}'.format(e.message))
        sys.exit(1)
    except LauncherException as e:
        log.error('[red]{}: [reset]{}'.format(e.message, e.errors))
        sys.exit(1)
    except (TmuxException, ToolException) as e:
        if hasattr(e, 'errors'):
            log.error('[red]{}: [reset]{}'.format(e.message, e.errors))
        else:
            log.error('[red]Raw error: [reset]{}'.format(str(e)))
        sys.exit(3)


def run(config, mode):
    """
    Open a session from a picked directory, or browse existing ones
    """
    if mode in OPEN_MODES:
        Launcher(config).open(mode)

    elif mode == BROWSE_MODE:
        SessionBrowser(config).browse()
