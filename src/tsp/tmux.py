# -*- coding: utf-8 -*-
import collections
import os
import subprocess
from .logger import Logger

log = Logger()

# Characters tmux uses to separate session, window and pane in targets
RESERVED_CHARS = ':.'

# Separates format variables in formatted Tmux output
FIELD_SEPARATOR = '\t'


class TmuxException(Exception):
    pass


class PaneRef(collections.namedtuple('PaneRef', 'session window pane')):
    """
    Pane addressed by display indexes, as shown in the picker

    Indexes are volatile: killing a sibling renumbers the panes after it.
    """
    __slots__ = ()

    @classmethod
    def parse(cls, line):
        """
        Parse a `session:window.pane` line

        :param line: Picker row
        """
        session, _, rest = line.strip().rpartition(':')
        window, _, pane = rest.partition('.')
        if not session or not window.isdigit() or not pane.isdigit():
            raise ValueError('Invalid pane reference: {!r}'.format(line))
        return cls(session, int(window), int(pane))

    def __str__(self):
        return '{}:{}.{}'.format(self.session, self.window, self.pane)


class ResolvedPane(collections.namedtuple('ResolvedPane',
                                          'session window_id pane_id')):
    """
    Pane addressed by tmux's stable identifiers, e.g. `main:@3.%12`
    """
    __slots__ = ()

    def __str__(self):
        return '{}:{}.{}'.format(self.session, self.window_id, self.pane_id)


def sanitize(name):
    """
    Replace characters tmux reserves in target names with underscores

    Tabs and newlines go too, they would split formatted output.
    """
    for char in RESERVED_CHARS + FIELD_SEPARATOR + '\n':
        name = name.replace(char, '_')
    return name


def attach_or_switch(inside_tmux):
    """
    Pick the tmux command that brings a client to a session

    :param inside_tmux: Whether we're running within an attached client
    :return: 'switch-client' or 'attach-session'
    """
    return 'switch-client' if inside_tmux else 'attach-session'


class Tmux(object):
    """
    Tmux controller
    """
    def command(self, cmd, formats=None, many=False, flag='-F'):
        """
        Send custom Tmux command and return rich information

        Requested variables are separated by tabs, so names may hold
        quotes and backslashes.

        :param cmd: Tmux command and arguments
        :param formats: Format variables to request, decoded into a dict
        :param many: Expect one result per line
        :param flag: Option preceding the format, None for a positional one
        :return: (stdout, stderr)
        """
        cmd = ['tmux'] + cmd
        if formats:
            fmt = FIELD_SEPARATOR.join('#{%s}' % key for key in formats)
            if flag:
                cmd.append(flag)
            cmd.append(fmt)

        log.debug(' '.join(cmd))
        try:
            process = subprocess.Popen(
                cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
            stdout, stderr = process.communicate()
        except OSError:
            raise TmuxException('Unable to execute Tmux, aborting.')

        stderr = stderr.decode('utf_8').strip()
        stdout = stdout.decode('utf_8')
        if not formats:
            return stdout, stderr

        records = []
        for line in stdout.split('\n'):
            if not line:
                continue
            fields = line.split(FIELD_SEPARATOR)
            if len(fields) != len(formats):
                raise TmuxException('Unable to parse Tmux\'s response, '
                                    'please report bug.')
            records.append(dict(zip(formats, fields)))
        if many:
            return records, stderr
        return (records[0] if records else {}), stderr

    def interactive(self, cmd):
        """
        Run a Tmux command attached to the current terminal

        :param cmd: Tmux command and arguments
        :return: Exit code
        """
        cmd = ['tmux'] + cmd
        log.debug(' '.join(cmd))
        try:
            return subprocess.call(cmd)
        except OSError:
            raise TmuxException('Unable to execute Tmux, aborting.')

    def within_session(self):
        """
        Returns true if currently within a Tmux session
        """
        return bool(os.environ.get('TMUX'))

    def new_session(self, session_name, root):
        """
        Create a new detached Tmux session

        :param session_name: New session's name
        :param root: Starting directory of the session
        :return: Session information
        """
        output, errors = self.command(
            ['new-session', '-Pd', '-s', session_name, '-c', root],
            ['session_id', 'session_name'])
        if errors:
            raise TmuxException(errors)
        session = {}
        for k, v in output.items():
            session[k.split('_')[1]] = v
        return session

    def attach(self, target):
        """
        Bring the client to a session, window or pane

        :param target: Target session, or `session:window.pane`
        """
        if target:
            cmd = attach_or_switch(self.within_session())
            return self.interactive([cmd, '-t', str(target)])

    def get_sessions(self):
        """
        Retrieve information for all sessions
        """
        sessions, errors = self.command(
            ['list-sessions'], ['session_id', 'session_name'], many=True)
        if errors:
            raise TmuxException(errors)
        return sessions

    def get_windows(self, session_name):
        """
        Retrieve information for all windows in a session

        :param session_name: Target session name
        """
        windows, errors = self.command(
            ['list-windows', '-t', session_name],
            ['window_id', 'window_index', 'window_name'],
            many=True)
        if errors:
            raise TmuxException(errors)
        return windows

    def get_panes(self, session_name, window_index):
        """
        Retrieve information for all panes in a window

        :param session_name: Target session name
        :param window_index: Target window index
        """
        panes, errors = self.command(
            ['list-panes', '-t', '{}:{}'.format(session_name, window_index)],
            ['pane_id', 'pane_index'],
            many=True)
        if errors:
            raise TmuxException(errors)
        return panes

    def find_pane(self, ref):
        """
        Resolve a pane's display index to its stable identifiers

        :param ref: PaneRef to resolve
        :return: ResolvedPane, or None when nothing matches
        """
        panes, errors = self.command(
            ['list-panes', '-t', '{}:{}'.format(ref.session, ref.window),
             '-f', '#{{==:#{{pane_index}},{}}}'.format(ref.pane)],
            ['session_name', 'window_id', 'pane_id'],
            many=True)
        if errors or not panes:
            return None
        pane = panes[0]
        return ResolvedPane(
            pane['session_name'], pane['window_id'], pane['pane_id'])

    def current_pane(self):
        """
        Returns the pane this process runs in, with its window's zoom flag

        :return: (ResolvedPane, zoomed)
        """
        output, errors = self.command(
            ['display-message', '-p'],
            ['session_name', 'window_id', 'pane_id', 'window_zoomed_flag'],
            flag=None)
        if errors or not output:
            raise TmuxException(errors or 'Unable to find current pane')
        pane = ResolvedPane(
            output['session_name'], output['window_id'], output['pane_id'])
        return pane, output['window_zoomed_flag'] == '1'

    def toggle_zoom(self, pane_id):
        """
        Zoom or unzoom a pane

        :param pane_id: Target pane identifier
        """
        return self.command(['resize-pane', '-Z', '-t', pane_id])

    def kill_pane(self, target):
        """
        Kill a specified Tmux pane

        :param target: ResolvedPane or target string
        """
        return self.command(['kill-pane', '-t', str(target)])

    def rename_session(self, session_name, new_name):
        """
        Rename a Tmux session

        :param session_name: Target session name
        :param new_name: The session's new name
        """
        return self.command(
            ['rename-session', '-t', session_name, new_name])
