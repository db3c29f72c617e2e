# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:50:31
# @Author : Kariko Lin

from .consts import DEFAULT_SECTION
from .model import ConfigClass, ConfigSection, SectionCursor, StaleCursorError
from .parser import ConfigParser, ConfigYamlParser
