# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/11 21:40:12
# @Author : Kariko Lin

from .model import ConfigMap, Key, SectionRef, SectionTable
from .parser import CfgLine, CfgParser, LineKind, parse_line
