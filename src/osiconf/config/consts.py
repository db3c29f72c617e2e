# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 21:52:40
# @Author : Kariko Lin

from enum import Enum

# pairs found before any section header go here.
DEFAULT_SECTION = 'Global'

COMMENT_MARKS = (';', '#')


class BoolLiteral(str, Enum):
    TRUE = 'true'
    FALSE = 'false'


# inclusive (min, max) of each typed accessor.
INT_RANGE = (-(1 << 31), (1 << 31) - 1)
UINT16_RANGE = (0, (1 << 16) - 1)
UINT64_RANGE = (0, (1 << 64) - 1)
