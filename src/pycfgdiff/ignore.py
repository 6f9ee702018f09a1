# -*- encoding: utf-8 -*-
# @File   : ignore.py
# @Time   : 2026/10/12 10:40:27
# @Author : Kariko Lin

from typing import Iterable

from .abstract import FileReader
from .cfg.model import Key
from .consts import DEFAULT_ENCODING
from .diff import Difference


class IgnoreFilter:
    """Suppresses a key whose section name *or* property name
    equals one of the tokens. Exact match, no glob or prefix.
    """
    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._tokens = frozenset(tokens)

    def is_ignored(self, key: Key) -> bool:
        if not self._tokens:
            return False
        return (key.property in self._tokens
                or key.section.name in self._tokens)

    def filter(self, differences: Iterable[Difference]) -> list[Difference]:
        if not self._tokens:
            return list(differences)
        return [i for i in differences if not self.is_ignored(i.key)]

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f'IgnoreFilter({sorted(self._tokens)!r})'


class IgnoreListParser(FileReader[IgnoreFilter]):
    """One token per line. Surrounding whitespace is stripped
    and blank lines skipped, nothing else is special (no comments).
    """
    def __init__(self, filename: str, encoding: str = DEFAULT_ENCODING):
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IgnoreFilter:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            tokens = [i.strip() for i in fp]
        return IgnoreFilter(i for i in tokens if i)
