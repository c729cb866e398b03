# -*- coding: utf-8 -*-
"""Tests for directory validation and session creation."""
import datetime
import os

import mock
import pytest

from conftest import FakePicker, FakeTmux
from tsp.launcher import (
    DirectoryNotFound, Launcher, SelectionCancelled, resolve_directory,
    session_name)

NOW = datetime.datetime(2024, 3, 7, 9, 5, 2)


def first(messages):
    return messages[0]


class TestResolveDirectory:
    def test_home_sentinel_is_base_dir(self, tmpdir):
        base = str(tmpdir)
        assert resolve_directory(base, '~', ['bye']) == base

    def test_relative_directory(self, tmpdir):
        tmpdir.mkdir('projects').mkdir('tsp')
        path = resolve_directory(str(tmpdir), 'projects/tsp', ['bye'])
        assert path == os.path.join(str(tmpdir), 'projects', 'tsp')

    def test_empty_is_cancelled_with_message(self, tmpdir):
        with pytest.raises(SelectionCancelled) as excinfo:
            resolve_directory(str(tmpdir), '', ['a', 'b'], choice=first)
        assert excinfo.value.message == 'a'

    def test_missing_directory_names_path(self, tmpdir):
        with pytest.raises(DirectoryNotFound) as excinfo:
            resolve_directory(str(tmpdir), 'nope', ['bye'])
        assert excinfo.value.path == os.path.join(str(tmpdir), 'nope')

    def test_file_is_not_a_directory(self, tmpdir):
        tmpdir.join('notes.txt').write('x')
        with pytest.raises(DirectoryNotFound):
            resolve_directory(str(tmpdir), 'notes.txt', ['bye'])

    def test_absolute_history_entry_is_kept(self, tmpdir):
        # Directories outside base come from history as absolute paths
        outside = tmpdir.mkdir('outside')
        base = tmpdir.mkdir('home')
        assert resolve_directory(str(base), str(outside), ['bye']) == \
            str(outside)


class TestSessionName:
    def test_appends_timestamp(self):
        assert session_name('code', NOW) == 'code_0307090502'

    def test_replaces_reserved_characters(self):
        assert session_name('.config/nvim:old', NOW) == \
            '_config/nvim_old_0307090502'

    def test_home_sentinel(self):
        assert session_name('~', NOW) == 'home_0307090502'

    def test_differs_across_seconds(self):
        later = NOW + datetime.timedelta(seconds=1)
        assert session_name('code', NOW) != session_name('code', later)


class TestLauncher:
    def make(self, config, answer, tmux=None):
        tmux = tmux or FakeTmux()
        picker = FakePicker(answer=answer)
        launcher = Launcher(config, tmux=tmux, picker=picker,
                            clock=lambda: NOW, choice=first)
        return launcher, tmux, picker

    @mock.patch('tsp.launcher.list_directories', return_value=['~'])
    def test_open_home_from_empty_history(self, list_dirs, config, tmpdir):
        launcher, tmux, picker = self.make(config, '~')
        name = launcher.open('history')

        list_dirs.assert_called_once_with('history', str(tmpdir), config)
        assert picker.candidates == ['~']
        assert name == 'home_0307090502'
        assert tmux.sessions_created == [(name, str(tmpdir))]
        assert tmux.calls[-1] == ('attach', name)

    @mock.patch('tsp.launcher.list_directories')
    def test_open_scanned_directory(self, list_dirs, config, tmpdir):
        tmpdir.mkdir('my.project')
        list_dirs.return_value = ['~', 'my.project']
        launcher, tmux, picker = self.make(config, 'my.project')
        name = launcher.open('scan')

        assert name == 'my_project_0307090502'
        assert tmux.sessions_created == [
            (name, os.path.join(str(tmpdir), 'my.project'))]

    def test_picker_layout(self, config):
        picker_config = self.make(config, None)[0].picker_config()
        assert (picker_config.width, picker_config.height) == ('30%', '50%')
        assert not picker_config.multi

    @mock.patch('tsp.launcher.list_directories', return_value=['~'])
    def test_cancel_creates_nothing(self, list_dirs, config):
        launcher, tmux, _ = self.make(config, None)
        with pytest.raises(SelectionCancelled):
            launcher.open('history')
        assert tmux.calls == []

    def test_missing_directory_creates_nothing(self, config):
        launcher, tmux, _ = self.make(config, None)
        with pytest.raises(DirectoryNotFound):
            launcher.start('gone')
        assert tmux.calls == []
