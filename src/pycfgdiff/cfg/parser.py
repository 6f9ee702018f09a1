# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/11 21:31:45
# @Author : Kariko Lin

"""Note: this is an INI *subset* reader, not `configparser`.

Supported lines (anything else is skipped, never an error):

    ```ini
    key = val   ; before any header, filed under [root].

    [section]   ; `[a=b]` is a header too.
    key =       ; empty value is still a value.
    ```

No multi-line values, no escapes, no quoting.
A repeated key within one section keeps the last value.
"""

import logging
from enum import Enum
from io import BytesIO, TextIOBase, TextIOWrapper
from typing import IO, Iterator, NamedTuple

import chardet

from .model import ConfigMap, Key
from ..abstract import FileReader
from ..consts import (
    AUTO_ENCODING, BOM, COMMENT_SIGN, DEFAULT_ENCODING, DETECT_CONFIDENCE,
    PAIR_SIGN, REPLACEMENT_CHAR, SECTION_CLOSE, SECTION_OPEN
)


class LineKind(Enum):
    BLANK = 'blank'
    SECTION = 'section'
    PAIR = 'pair'
    UNKNOWN = 'unknown'


class CfgLine(NamedTuple):
    kind: LineKind
    name: str | None = None   # header name, or key of a pair
    value: str | None = None  # pair only


BLANK_LINE = CfgLine(LineKind.BLANK)
UNKNOWN_LINE = CfgLine(LineKind.UNKNOWN)


def parse_line(line: str) -> CfgLine:
    """Classify one (untrimmed) line.

    The first `;` starts a comment, even inside a header or a value.
    A bracket-shaped line is a header before it is a pair.
    """
    if not line or line.isspace():
        return BLANK_LINE
    if (idx := line.find(COMMENT_SIGN)) >= 0:
        line = line[:idx]
    line = line.strip()
    if not line:
        return BLANK_LINE

    if line.startswith(SECTION_OPEN) and line.endswith(SECTION_CLOSE):
        return CfgLine(LineKind.SECTION, line[1:-1])

    key, sign, val = line.partition(PAIR_SIGN)
    if not sign:
        return UNKNOWN_LINE
    return CfgLine(LineKind.PAIR, key.strip(), val.strip())


def is_ascii_compatible(codec: str) -> bool:
    """Whether `codec` keeps `\\n` and the INI signs as single ASCII bytes,
    so a byte stream may be split into lines before decoding."""
    signs = f'\n{COMMENT_SIGN}{PAIR_SIGN}{SECTION_OPEN}{SECTION_CLOSE}'
    try:
        return signs.encode('ascii').decode(codec) == signs
    except UnicodeDecodeError:
        return False


def _decode_lines(
    buf: IO[bytes] | IO[str], encoding: str
) -> Iterator[str]:
    if isinstance(buf, TextIOBase):
        yield from buf
        return
    if is_ascii_compatible(encoding):
        for lineno, raw in enumerate(buf, 1):
            try:
                yield raw.decode(encoding)
            except UnicodeDecodeError as e:
                logging.debug(f'line {lineno} dropped, not {encoding}: {e}')
        return

    # UTF-16/32 and alike: `\n` is more than one byte, decode as a whole.
    # bad bytes come back as U+FFFD, which drops that line only.
    text = TextIOWrapper(buf, encoding, errors='replace')
    try:
        for lineno, raw in enumerate(text, 1):
            if REPLACEMENT_CHAR in raw:
                logging.debug(f'line {lineno} dropped, not {encoding}.')
                continue
            yield raw
    finally:
        text.detach()


class CfgParser(FileReader[ConfigMap]):
    def __init__(self, filename: str, encoding: str = DEFAULT_ENCODING):
        """`encoding='auto'` lets `chardet` guess the codec."""
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(
        buf: IO[bytes] | IO[str],
        encoding: str = DEFAULT_ENCODING
    ) -> ConfigMap:
        """读取一个 cfg 流，返回扁平的`(section, property) -> value`表。

        字节流逐行解码，解不出来的那一行直接丢弃；文本流原样读取。
        如没有特殊需求，直接调用`self.read()`便是。
        """
        ret = ConfigMap()
        this_sect = ret.root
        for lineno, raw in enumerate(_decode_lines(buf, encoding), 1):
            if lineno == 1:
                raw = raw.removeprefix(BOM)
            line = parse_line(raw)
            match line.kind:
                case LineKind.SECTION:
                    this_sect = ret.section(line.name)
                case LineKind.PAIR:
                    ret[Key(this_sect, line.name)] = line.value
                case _:
                    pass
        return ret

    @staticmethod
    def detect_codec(raw: bytes) -> str:
        codec = chardet.detect(raw)
        if (
            codec is None
            or codec['encoding'] is None
            or codec['confidence'] < DETECT_CONFIDENCE
        ):
            return DEFAULT_ENCODING
        return codec['encoding']

    def read(self) -> ConfigMap:
        """读取`CfgParser`实例指定的文件。打开失败的`OSError`照常抛出。"""
        # handle is released before parsing starts.
        with open(self._fn, 'rb') as fp:
            raw = fp.read()
        codec = self._codec
        if codec == AUTO_ENCODING:
            codec = self.detect_codec(raw)
            logging.debug(f'{self._fn}: guessed codec {codec}')
        return self.readstream(BytesIO(raw), codec)

    def __str__(self) -> str:
        return f'{super().__str__()} ({self._codec})'
