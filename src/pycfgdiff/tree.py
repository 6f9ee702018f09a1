# -*- encoding: utf-8 -*-
# @File   : tree.py
# @Time   : 2026/10/12 11:05:40
# @Author : Kariko Lin

"""Pairing `.cfg` files across two directory trees.

Files are paired by *file name* only, wherever they sit in the tree.
So these two are a pair:

    - staging
        - app.cfg
    - production
        - conf.d
            - app.cfg
"""

import logging
from os import walk
from os.path import basename, isdir, join, splitext
from typing import Iterator
from warnings import warn

from .consts import CFG_EXTENSIONS


class InvalidTreeRoot(OSError):
    """To record a tree root which is missing or not a directory."""
    pass


def _reraise(err: OSError) -> None:
    # `os.walk` swallows listing errors by default.
    raise err


def is_cfg(path: str) -> bool:
    return splitext(path)[1][1:] in CFG_EXTENSIONS


def read_tree(root: str) -> Iterator[str]:
    """Yield every `.cfg`/`.CFG` path under `root`, in sorted walk order."""
    if not isdir(root):
        raise InvalidTreeRoot(f'not a directory: {root}')
    for dirpath, dirnames, filenames in walk(root, onerror=_reraise):
        dirnames.sort()
        for i in sorted(filenames):
            if is_cfg(i):
                yield join(dirpath, i)


def _index_tree(root: str) -> dict[str, str]:
    ret: dict[str, str] = {}
    for path in read_tree(root):
        name = basename(path)
        if name in ret:
            warn(f'"{name}" appears more than once under {root}, '
                 f'"{ret[name]}" is replaced by "{path}".')
        ret[name] = path
    return ret


def pair_trees(left: str, right: str) -> dict[str, tuple[str, str]]:
    """file name -> `(left path, right path)`, sorted by file name.

    A file present in only one tree is left out.
    """
    lefts, rights = _index_tree(left), _index_tree(right)
    ret = {
        name: (lefts[name], rights[name])
        for name in sorted(lefts.keys() & rights.keys())
    }
    logging.info(
        f'{len(ret)} pair(s) matched, '
        f'{len(lefts) - len(ret)} left-only, {len(rights) - len(ret)} right-only.')
    return ret
