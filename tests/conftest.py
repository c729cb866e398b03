# -*- coding: utf-8 -*-
import pytest

from tsp import config as configuration
from tsp.fzf import Selection
from tsp.tmux import ResolvedPane


class FakeTmux(object):
    """
    In-memory tmux server

    Panes are kept in display order per window, so killing one renumbers
    the ones after it, like tmux does.
    """
    def __init__(self, layout=None, current=None, zoomed=False, inside=True):
        # {session: {window_index: [pane_id, ...]}}
        self.layout = layout or {}
        self.current = current
        self.zoomed = zoomed
        self.inside = inside
        self.calls = []
        self.sessions_created = []
        self.killed = []

    def window_id(self, session, window):
        return '@{}{}'.format(session, window)

    def within_session(self):
        return self.inside

    def get_sessions(self):
        return [{'session_id': '$' + name, 'session_name': name}
                for name in self.layout]

    def get_windows(self, session_name):
        return [{'window_id': self.window_id(session_name, index),
                 'window_index': str(index), 'window_name': 'zsh'}
                for index in sorted(self.layout[session_name])]

    def get_panes(self, session_name, window_index):
        panes = self.layout[session_name][int(window_index)]
        return [{'pane_id': pane_id, 'pane_index': str(index)}
                for index, pane_id in enumerate(panes)]

    def find_pane(self, ref):
        self.calls.append(('find_pane', str(ref)))
        panes = self.layout.get(ref.session, {}).get(ref.window, [])
        if ref.pane >= len(panes):
            return None
        return ResolvedPane(ref.session,
                            self.window_id(ref.session, ref.window),
                            panes[ref.pane])

    def current_pane(self):
        self.calls.append(('current_pane',))
        return self.current, self.zoomed

    def toggle_zoom(self, pane_id):
        self.calls.append(('toggle_zoom', pane_id))
        return '', ''

    def kill_pane(self, target):
        self.calls.append(('kill_pane', str(target)))
        self.killed.append(target)
        for windows in self.layout.values():
            for panes in windows.values():
                if target.pane_id in panes:
                    panes.remove(target.pane_id)
        return '', ''

    def rename_session(self, session_name, new_name):
        self.calls.append(('rename_session', session_name, new_name))
        self.layout[new_name] = self.layout.pop(session_name)
        return '', ''

    def new_session(self, session_name, root):
        self.calls.append(('new_session', session_name, root))
        self.sessions_created.append((session_name, root))
        return {'id': '$9', 'name': session_name}

    def attach(self, target):
        self.calls.append(('attach', str(target)))
        return 0


class FakePicker(object):
    """
    Picker returning canned answers and remembering what it was shown
    """
    def __init__(self, answer=None, key='', rows=None):
        self.answer = answer
        self.selection = Selection(key, rows or [])
        self.candidates = None
        self.config = None

    def pick_one(self, candidates, config):
        self.candidates = candidates
        self.config = config
        return self.answer

    def pick_many(self, candidates, config):
        self.candidates = candidates
        self.config = config
        return self.selection


@pytest.fixture
def config(tmpdir):
    cfg = configuration.merge(configuration.DEFAULTS, {})
    cfg['base_dir'] = str(tmpdir)
    return cfg
