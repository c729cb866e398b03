# -*- coding: utf-8 -*-
import sys
import re


class Logger(object):
    """
    Terminal logger with color-support

    Messages are written with inline markup, e.g. `[boldred]`, which is
    translated to escape codes when the target stream is a terminal and
    stripped otherwise.
    """
    debug_mode = False
    _colors = {'reset': 0, 'black': 30, 'white': 37,
               'cyan': 36, 'magenta': 35, 'blue': 34,
               'yellow': 33, 'green': 32, 'red': 31}

    def echo(self, *args):
        """
        Prints text to stdout with color codes
        Example:
          log.echo('[green]hey [boldred]there!')

        :param args: Multiple string messages
        """
        self._write(sys.stdout, args)

    def error(self, *args):
        """
        Prints text to stderr with color codes

        :param args: Multiple string messages
        """
        self._write(sys.stderr, args)

    def debug(self, *args):
        """
        Prints dimmed text to stderr, only when debug mode is enabled

        :param args: Multiple string messages
        """
        if self.debug_mode:
            self._write(sys.stderr,
                        ['[boldblack]{}'.format(arg) for arg in args])

    def _write(self, stream, messages):
        is_tty = stream.isatty()
        for arg in messages:
            msg = re.sub(r'\[(bold)?([a-z]+)\]',
                         lambda match: self._colorize(match, is_tty), arg)
            if is_tty:
                msg += '\x1b[0m'
            stream.write(msg + '\n')
        stream.flush()

    def _colorize(self, match, is_tty):
        # Bracketed text that isn't a color, e.g. `[y/N]`, is left alone
        if match.group(2) not in self._colors:
            return match.group(0)
        if not is_tty:
            return ''
        attr = ['1' if match.group(1) == 'bold' else '0']
        attr.append(str(self._colors[match.group(2)]))
        return '\x1b[{}m'.format(';'.join(attr))
