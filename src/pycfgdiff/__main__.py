# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2026/10/12 16:42:19
# @Author : Kariko Lin

import sys

from .cli import main

sys.exit(main())
