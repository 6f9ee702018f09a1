# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/11 21:04:19
# @Author : Kariko Lin

"""
Flat key-value view of a `.cfg` document.

Sections are not containers here: each value is keyed by
`(section, property)`, and a section is just an interned name
owned by the `SectionTable` of one parse session.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Iterator, Mapping, NamedTuple

from ..consts import ROOT_SECTION


@dataclass(frozen=True, slots=True)
class SectionRef:
    """Handle of an interned section name.

    Compared and hashed by `name` only, so two refs from different
    sessions (or a reopened `[section]`) still denote one section.
    """
    name: str
    index: int = field(default=-1, compare=False)

    def __str__(self) -> str:
        return self.name


class SectionTable:
    """name -> `SectionRef`, one per distinct name."""
    def __init__(self) -> None:
        self.__refs: dict[str, SectionRef] = {}

    def intern(self, name: str) -> SectionRef:
        if (ref := self.__refs.get(name)) is None:
            ref = SectionRef(name, len(self.__refs))
            self.__refs[name] = ref
        return ref

    def __contains__(self, name: object) -> bool:
        return name in self.__refs

    def __len__(self) -> int:
        return len(self.__refs)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__refs)


class Key(NamedTuple):
    section: SectionRef
    property: str

    @property
    def sort_key(self) -> tuple[str, str]:
        return self.section.name, self.property

    def __str__(self) -> str:
        return f'{self.section.name}.{self.property}'


class ConfigMap(MutableMapping[Key, str]):
    """... is simply a dict of `Key: str`, within its own section table.

    Setting an existing key overwrites it (last occurrence wins).
    """
    def __init__(self) -> None:
        self.__raw: dict[Key, str] = {}
        self.sections = SectionTable()
        self.root = self.sections.intern(ROOT_SECTION)

    def __getitem__(self, key: Key) -> str:
        return self.__raw[key]

    def __setitem__(self, key: Key, value: str) -> None:
        self.__raw[key] = value

    def __delitem__(self, key: Key) -> None:
        del self.__raw[key]

    def __iter__(self) -> Iterator[Key]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __repr__(self) -> str:
        return 'ConfigMap { .sections = %d, .cnt = %d }' % (
            len(self.sections), len(self.__raw))

    def section(self, name: str) -> SectionRef:
        return self.sections.intern(name)

    def put(self, section: str, prop: str, value: str) -> Key:
        key = Key(self.section(section), prop)
        self[key] = value
        return key

    def get_value(self, section: str, prop: str) -> str | None:
        # no interning on lookup, a probe shouldn't grow the table.
        return self.__raw.get(Key(SectionRef(section), prop))

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, str]]) -> 'ConfigMap':
        """e.g. `{'db': {'host': 'localhost'}}` => `db.host = localhost`."""
        ret = cls()
        for section, pairs in data.items():
            for prop, value in pairs.items():
                ret.put(section, prop, value)
        return ret
