# -*- encoding: utf-8 -*-
# @File   : diff.py
# @Time   : 2026/10/12 10:12:03
# @Author : Kariko Lin

"""Value drift between two `ConfigMap`s.

Only keys present on *both* sides are compared, so a key added to
or dropped from one side is not a difference.
"""

from dataclasses import dataclass

from .cfg.model import ConfigMap, Key


@dataclass(frozen=True, slots=True)
class Difference:
    key: Key
    left: str
    right: str

    def to_dict(self) -> dict[str, str]:
        return {
            'section': self.key.section.name,
            'property': self.key.property,
            'left': self.left,
            'right': self.right,
        }

    def __str__(self) -> str:
        return f'{self.key}: {self.left!r} -> {self.right!r}'


def diff(
    left: ConfigMap, right: ConfigMap, *, sort: bool = False
) -> list[Difference]:
    """Values compared as opaque strings, no normalization.

    Order follows `left` unless `sort`, then by `(section, property)`.
    """
    ret = []
    for key, value in left.items():
        # keys hash by section *name*, so a lookup across sessions is fine.
        other = right.get(key)
        if other is None or other == value:
            continue
        ret.append(Difference(key, value, other))
    if sort:
        ret.sort(key=lambda x: x.key.sort_key)
    return ret
