# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/11 20:15:56
# @Author : Kariko Lin

from enum import Enum

# pairs before any `[section]` header are filed here.
ROOT_SECTION = 'root'

COMMENT_SIGN = ';'
PAIR_SIGN = '='
SECTION_OPEN = '['
SECTION_CLOSE = ']'

# exact match, `Cfg` is not picked up.
CFG_EXTENSIONS = ('cfg', 'CFG')

DEFAULT_ENCODING = 'utf-8'
# dropped from the head of the first line, whatever the codec.
BOM = '\ufeff'
REPLACEMENT_CHAR = '\ufffd'
AUTO_ENCODING = 'auto'
# below this, `chardet` is considered guessing.
DETECT_CONFIDENCE = 0.8

STDOUT = '-'


class ReportFormat(str, Enum):
    TEXT = 'text'
    JSON = 'json'
    YAML = 'yaml'
