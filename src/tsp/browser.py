# -*- coding: utf-8 -*-
from .fzf import Picker, PickerConfig
from .logger import Logger
from .tmux import PaneRef, Tmux, sanitize

log = Logger()

KILL_KEY = 'ctrl-alt-k'
RENAME_KEY = 'ctrl-r'
SWITCH_KEY = 'enter'
EXPECT_KEYS = [KILL_KEY, RENAME_KEY, SWITCH_KEY]
HEADER = 'enter: switch | ctrl-alt-k: kill panes | ctrl-r: rename sessions'


def distinct_sessions(refs):
    """
    Session names of a selection, each once, in selection order
    """
    seen = set()
    names = []
    for ref in refs:
        if ref.session not in seen:
            seen.add(ref.session)
            names.append(ref.session)
    return names


class SessionBrowser(object):
    """
    Browse all panes across sessions, then switch, kill or rename
    """
    def __init__(self, config, tmux=None, picker=None, prompt=input):
        self._config = config
        self._tmux = tmux or Tmux()
        self._picker = picker or Picker()
        self._prompt = prompt

    def picker_config(self):
        layout = self._config['browser_picker']
        return PickerConfig(
            width=layout['width'], height=layout['height'],
            fallback_height=self._config['fallback_height'],
            multi=True, expect=EXPECT_KEYS, header=HEADER,
            preview=self._config['preview'],
            preview_window=self._config['preview_window'])

    def list_triples(self):
        """
        Every `session:window.pane` of the server, current one included
        """
        triples = []
        for session in self._tmux.get_sessions():
            name = session['session_name']
            for window in self._tmux.get_windows(name):
                index = window['window_index']
                for pane in self._tmux.get_panes(name, index):
                    triples.append('{}:{}.{}'.format(
                        name, index, pane['pane_index']))
        return triples

    def browse(self):
        """
        Present every pane in the picker and act on the selection

        The invoking pane is zoomed while picking, when it isn't already.
        """
        triples = self.list_triples()
        zoomed_pane = None
        if self._tmux.within_session():
            current, zoomed = self._tmux.current_pane()
            if not zoomed:
                self._tmux.toggle_zoom(current.pane_id)
                zoomed_pane = current.pane_id
        try:
            selection = self._picker.pick_many(
                triples, self.picker_config())
        finally:
            if zoomed_pane:
                self._tmux.toggle_zoom(zoomed_pane)

        return self.dispatch(selection.key, selection.rows)

    def dispatch(self, key, rows):
        """
        Run the action bound to the pressed key on the selected rows

        :param key: Expect key that closed the picker, empty for default
        :param rows: Selected `session:window.pane` lines
        """
        if not rows:
            return None
        refs = [PaneRef.parse(row) for row in rows]
        if key == KILL_KEY:
            return self.kill(refs)
        elif key == RENAME_KEY:
            return self.rename(refs)
        elif key in (SWITCH_KEY, ''):
            return self.switch(refs)
        log.debug('Ignoring unbound key {}'.format(key))
        return None

    def resolve(self, refs):
        """
        Resolve all references to stable identifiers, the invoking pane last

        Every reference is resolved before anything is killed, since killing
        a pane renumbers its siblings.

        :param refs: PaneRefs as selected
        :return: ResolvedPanes in kill order
        """
        current = None
        if self._tmux.within_session():
            current = self._tmux.current_pane()[0]

        targets = []
        kill_self = False
        for ref in refs:
            pane = self._tmux.find_pane(ref)
            if pane is None:
                log.error('[yellow]Pane [white]{}[yellow] is gone,'
                          ' skipping'.format(ref))
            elif pane == current:
                kill_self = True
            elif pane not in targets:
                targets.append(pane)
        if kill_self:
            targets.append(current)
        return targets

    def kill(self, refs):
        targets = self.resolve(refs)
        for target in targets:
            _, errors = self._tmux.kill_pane(target)
            if errors:
                log.error('[red]Unable to kill {}: [reset]{}'
                          .format(target, errors))
        return targets

    def rename(self, refs):
        """
        Prompt once for every distinct session in the selection

        Ctrl-D or Ctrl-C at a prompt stops renaming.
        """
        renamed = {}
        for name in distinct_sessions(refs):
            try:
                answer = self._prompt('Rename session {}: '.format(name))
            except (EOFError, KeyboardInterrupt):
                # Ctrl-D or Ctrl-C ends renaming, earlier renames stay
                log.echo('')
                break
            new_name = sanitize(answer.strip())
            if not new_name:
                continue
            _, errors = self._tmux.rename_session(name, new_name)
            if errors:
                log.error('[red]Unable to rename {}: [reset]{}'
                          .format(name, errors))
            else:
                renamed[name] = new_name
        return renamed

    def switch(self, refs):
        """
        Bring the client to the first selected pane, ignoring the rest
        """
        target = refs[0]
        self._tmux.attach(str(target))
        return target
