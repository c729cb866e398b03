# -*- coding: utf-8 -*-
"""Fuzzy tmux session launcher and browser.

Jumping between projects means opening a tmux session in the right
directory, and cleaning up means hunting down stray panes.
`tsp` puts both behind fzf: pick a directory from zoxide's history or
an fd scan to open a fresh session there, or browse every
session/window/pane to switch, kill or rename.
"""
__package__ = 'tsp'
__license__ = 'MIT'
__version__ = '0.1.0'
__author__ = __maintainer__ = 'Rafael Bodill'
__email__ = 'justrafi@gmail'
