# -*- encoding: utf-8 -*-
# @File   : compare.py
# @Time   : 2026/10/12 14:20:11
# @Author : Kariko Lin

import logging
from dataclasses import dataclass, field

from .cfg.parser import CfgParser
from .consts import DEFAULT_ENCODING
from .diff import Difference, diff
from .ignore import IgnoreFilter
from .tree import pair_trees


@dataclass
class FileReport:
    """Differences of one matched file pair."""
    name: str
    left: str
    right: str
    differences: list[Difference] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.differences)

    def to_dict(self) -> dict:
        return {
            'file': self.name,
            'left': self.left,
            'right': self.right,
            'count': self.count,
            'differences': [i.to_dict() for i in self.differences],
        }


def diff_paths(
    left: str, right: str, *,
    encoding: str = DEFAULT_ENCODING,
    sort: bool = False
) -> list[Difference]:
    """Read both files and diff them. May raise `OSError`."""
    return diff(
        CfgParser(left, encoding).read(),
        CfgParser(right, encoding).read(),
        sort=sort)


def compare_trees(
    left_root: str, right_root: str, *,
    ignore: IgnoreFilter | None = None,
    encoding: str = DEFAULT_ENCODING,
    sort: bool = True
) -> list[FileReport]:
    """Diff every file pair of two trees.

    Pairs left without differences (after `ignore`) are not reported.
    Any `OSError` aborts the whole comparison, no partial result.
    """
    if ignore is None:
        ignore = IgnoreFilter()
    ret = []
    for name, (left, right) in pair_trees(left_root, right_root).items():
        found = diff_paths(left, right, encoding=encoding, sort=sort)
        kept = ignore.filter(found)
        logging.debug(
            f'{name}: {len(found)} difference(s), '
            f'{len(found) - len(kept)} ignored.')
        if kept:
            ret.append(FileReport(name, left, right, kept))
    return ret
