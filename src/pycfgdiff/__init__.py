# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/11 20:01:52
# @Author : Kariko Lin

import logging

from .cfg import CfgParser, ConfigMap, Key, SectionRef, parse_line
from .compare import FileReport, compare_trees, diff_paths
from .diff import Difference, diff
from .ignore import IgnoreFilter, IgnoreListParser
from .tree import InvalidTreeRoot, pair_trees, read_tree

__version__ = '0.1.0'

__all__ = [
    'CfgParser', 'ConfigMap', 'Key', 'SectionRef', 'parse_line',
    'Difference', 'diff',
    'IgnoreFilter', 'IgnoreListParser',
    'InvalidTreeRoot', 'pair_trees', 'read_tree',
    'FileReport', 'compare_trees', 'diff_paths',
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
