# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/11 20:22:30
# @Author : Kariko Lin

import sys
from abc import ABCMeta, abstractmethod
from contextlib import contextmanager, nullcontext
from typing import Generic, Iterator, TextIO, TypeVar

from .consts import DEFAULT_ENCODING, STDOUT

T = TypeVar('T')


class FileReader(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn


class FileWriter(Generic[T], metaclass=ABCMeta):
    """`filename` being `-` means writing to stdout."""
    def __init__(
        self, filename: str = STDOUT, encoding: str = DEFAULT_ENCODING
    ) -> None:
        self._fn = filename
        self._codec = encoding

    @contextmanager
    def _open(self) -> Iterator[TextIO]:
        if self._fn == STDOUT:
            # never close the interpreter's stdout.
            with nullcontext(sys.stdout) as fp:
                yield fp
        else:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                yield fp

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
