# -*- coding: utf-8 -*-
import datetime
import os
import random
from .directories import HOME, base_directory, list_directories
from .fzf import Picker, PickerConfig
from .logger import Logger
from .tmux import Tmux, sanitize

log = Logger()

TIMESTAMP_FORMAT = '%m%d%H%M%S'


class LauncherException(Exception):
    def __init__(self, message, errors=''):
        super(LauncherException, self).__init__(message)
        self.errors = errors
        self.message = message


class SelectionCancelled(LauncherException):
    pass


class DirectoryNotFound(LauncherException):
    def __init__(self, path):
        super(DirectoryNotFound, self).__init__(
            'Directory does not exist', path)
        self.path = path


def resolve_directory(base_dir, rel_dir, messages, choice=random.choice):
    """
    Validate the picked directory and return its absolute path

    :param base_dir: Absolute base directory
    :param rel_dir: Picked directory, relative to base_dir, or `~`
    :param messages: Pool of cancellation messages
    :param choice: Picks one message from the pool
    :return: Absolute directory path
    """
    if not rel_dir:
        raise SelectionCancelled(choice(messages) if messages else 'Cancelled')
    if rel_dir == HOME:
        path = base_dir
    else:
        # History entries outside base_dir are absolute and stay so
        path = os.path.join(base_dir, rel_dir)
    if not os.path.isdir(path):
        raise DirectoryNotFound(path)
    return path


def session_name(rel_dir, now):
    """
    Derive a unique-ish session name from a directory and a time

    Two launches from one directory within the same second collide.

    :param rel_dir: Picked directory, relative to base, or `~`
    :param now: datetime used for the suffix
    """
    name = 'home' if rel_dir == HOME else rel_dir
    return '{}_{}'.format(sanitize(name), now.strftime(TIMESTAMP_FORMAT))


class Launcher(object):
    """
    Open a new session in a picked directory
    """
    def __init__(self, config, tmux=None, picker=None,
                 clock=datetime.datetime.now, choice=random.choice):
        self._config = config
        self._tmux = tmux or Tmux()
        self._picker = picker or Picker()
        self._clock = clock
        self._choice = choice
        self._base_dir = base_directory(config)

    def picker_config(self):
        layout = self._config['directory_picker']
        return PickerConfig(
            width=layout['width'], height=layout['height'],
            fallback_height=self._config['fallback_height'])

    def open(self, mode):
        """
        Pick a directory from history or a scan and start a session there

        :param mode: 'history' or 'scan'
        :return: Name of the new session
        """
        candidates = list_directories(mode, self._base_dir, self._config)
        rel_dir = self._picker.pick_one(candidates, self.picker_config())
        return self.start(rel_dir or '')

    def start(self, rel_dir):
        """
        Create a session rooted at a picked directory and attach to it

        :param rel_dir: Picked directory, relative to base, or `~`
        :return: Name of the new session
        """
        path = resolve_directory(
            self._base_dir, rel_dir,
            self._config['cancel_messages'], self._choice)
        name = session_name(rel_dir, self._clock())
        log.debug('Creating session {} at {}'.format(name, path))
        session = self._tmux.new_session(name, path)
        self._tmux.attach(session.get('name') or name)
        return name
