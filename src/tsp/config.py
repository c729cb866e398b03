# -*- coding: utf-8 -*-
import copy
import os
import yaml

CANCEL_MESSAGES = [
    'Nothing picked, nothing gained.',
    'Maybe next time.',
    'Retreating to the shell.',
    'No directory, no session.',
    'The void stares back.',
    'Abort, retry, ignore? Abort.',
    'Escape velocity reached.',
    'Left the building.',
]

DEFAULTS = {
    'base_dir': '~',
    'debug': False,
    'history_command': ['zoxide', 'query', '--list'],
    'scanner': 'fd',
    'ignore_file': '~/.config/git/ignore',
    'exclude': '.git',
    'directory_picker': {'width': '30%', 'height': '50%'},
    'browser_picker': {'width': '65%', 'height': '80%'},
    'fallback_height': '~50%',
    'preview': 'tmux capture-pane -ep -t {} | '
               'bat --color=always --style=plain --paging=never',
    'preview_window': 'right,60%',
    'cancel_messages': CANCEL_MESSAGES,
}


class ConfigException(Exception):
    def __init__(self, message, path=''):
        super(ConfigException, self).__init__(message)
        self.errors = path
        self.message = message


def default_path():
    """
    Returns the default configuration file path, honoring XDG
    """
    config_dir = os.environ.get(
        'XDG_CONFIG_HOME',
        os.path.join(os.path.expanduser('~'), '.config'))
    return os.path.join(config_dir, 'tsp', 'config.yml')


def load(path=None):
    """
    Load user configuration merged over defaults

    A missing file at the default location is fine, an explicitly
    requested file that is missing is not.

    :param path: Explicit configuration file path
    :return: Configuration dictionary
    """
    explicit = path is not None
    path = os.path.expanduser(path) if explicit else default_path()

    user = {}
    if os.path.isfile(path):
        with open(path, 'r') as stream:
            try:
                user = yaml.safe_load(stream) or {}
            except yaml.YAMLError as e:
                raise ConfigException('Invalid configuration', str(e))
        if not isinstance(user, dict):
            raise ConfigException('Configuration must be a mapping', path)
    elif explicit:
        raise ConfigException('Unable to find configuration', path)

    return merge(DEFAULTS, user)


def merge(defaults, overrides):
    """
    Merge overrides into a copy of defaults, nested mappings key by key
    """
    result = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge(result[key], value)
        else:
            result[key] = value
    return result
