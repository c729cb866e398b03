# -*- coding: utf-8 -*-
import collections
import subprocess
from .logger import Logger

log = Logger()

# fzf exits with 1 when nothing matched and 130 when interrupted
CANCEL_CODES = (1, 130)


class ToolException(Exception):
    def __init__(self, message, errors=''):
        super(ToolException, self).__init__(message)
        self.errors = errors
        self.message = message


Selection = collections.namedtuple('Selection', 'key rows')


class PickerConfig(object):
    """
    Layout and behavior of a single fzf invocation
    """
    def __init__(self, width='30%', height='50%', fallback_height='~50%',
                 multi=False, expect=None, header='', preview='',
                 preview_window=''):
        self.width = width
        self.height = height
        self.fallback_height = fallback_height
        self.multi = multi
        self.expect = expect or []
        self.header = header
        self.preview = preview
        self.preview_window = preview_window

    def arguments(self):
        """
        Translate the configuration to fzf command-line options
        """
        args = [
            '--tmux', 'center,{},{}'.format(self.width, self.height),
            '--height', self.fallback_height,
            '--layout', 'reverse', '--no-info', '--no-scrollbar',
        ]
        if self.multi:
            args.append('--multi')
        if self.expect:
            args.extend(['--expect', ','.join(self.expect)])
        if self.header:
            args.extend(['--header', self.header])
        if self.preview:
            args.extend(['--preview', self.preview])
            if self.preview_window:
                args.extend(['--preview-window', self.preview_window])
        return args


class Picker(object):
    """
    fzf front-end
    """
    def __init__(self, binary='fzf'):
        self._binary = binary

    def pick(self, candidates, config):
        """
        Let the user pick from candidates

        :param candidates: Lines to choose from
        :param config: PickerConfig instance
        :return: Output lines, empty when cancelled
        """
        cmd = [self._binary] + config.arguments()
        log.debug(' '.join(cmd))
        try:
            process = subprocess.Popen(
                cmd, stdin=subprocess.PIPE, stdout=subprocess.PIPE)
            stdout, _ = process.communicate(
                '\n'.join(candidates).encode('utf_8'))
        except OSError:
            raise ToolException('Unable to execute fzf', self._binary)

        if process.returncode in CANCEL_CODES or not stdout:
            return []
        return stdout.decode('utf_8').rstrip('\n').split('\n')

    def pick_one(self, candidates, config):
        """
        Returns the single picked line, or None when cancelled
        """
        lines = self.pick(candidates, config)
        return lines[0] if lines and lines[0] else None

    def pick_many(self, candidates, config):
        """
        Returns a Selection of the pressed key and picked rows

        The key is empty when fzf exits through its default action.
        """
        lines = self.pick(candidates, config)
        if not lines:
            return Selection('', [])
        return Selection(lines[0], [row for row in lines[1:] if row])
