# -*- coding: utf-8 -*-
import os
import subprocess
from .fzf import ToolException
from .logger import Logger

log = Logger()

HOME = '~'
MODES = ['history', 'scan']


def base_directory(config):
    """
    Returns the absolute base directory candidates are relative to
    """
    # YAML reads a bare `~` as null
    return os.path.abspath(os.path.expanduser(config.get('base_dir') or HOME))


def history_command(config):
    return list(config['history_command'])


def scan_command(base_dir, config):
    cmd = [config['scanner'], '--type', 'd', '--hidden']
    ignore_file = config.get('ignore_file')
    if ignore_file:
        cmd.extend(['--ignore-file', os.path.expanduser(ignore_file)])
    if config.get('exclude'):
        cmd.extend(['--exclude', config['exclude']])
    cmd.extend(['.', base_dir])
    return cmd


def run(cmd):
    """
    Run a directory tool, its errors go straight to the terminal

    :param cmd: Command and arguments
    :return: Output lines
    """
    log.debug(' '.join(cmd))
    try:
        output = subprocess.Popen(
            cmd, stdout=subprocess.PIPE).communicate()[0]
    except OSError:
        raise ToolException('Unable to execute {}'.format(cmd[0]),
                            ' '.join(cmd))
    return output.decode('utf_8').split('\n')


def relativize(lines, base_dir):
    """
    Strip the base directory prefix and trailing slashes

    Paths outside the base directory are kept absolute.
    """
    prefix = base_dir.rstrip('/') + '/'
    paths = []
    for line in lines:
        path = line.strip()
        if path != '/':
            path = path.rstrip('/')
        if path.startswith(prefix):
            path = path[len(prefix):]
        if path and path != HOME:
            paths.append(path)
    return paths


def sort_candidates(paths):
    """
    Sort case-insensitively by code point, with home first

    Matches `LC_ALL=C sort -f`, which folds to upper case.
    """
    return [HOME] + sorted(paths, key=lambda path: (path.upper(), path))


def list_directories(mode, base_dir, config):
    """
    Collect candidate directories for a mode

    :param mode: 'history' or 'scan'
    :param base_dir: Absolute base directory
    :param config: Configuration dictionary
    :return: Candidates, `~` first
    """
    if mode == 'history':
        cmd = history_command(config)
    elif mode == 'scan':
        cmd = scan_command(base_dir, config)
    else:
        raise ValueError('Unknown directory mode: {}'.format(mode))
    return sort_candidates(relativize(run(cmd), base_dir))
