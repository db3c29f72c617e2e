# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:36:18
# @Author : Kariko Lin

import logging
from os import PathLike

from .checksum import ChecksumFile, checksum_read, checksum_save
from .config import (
    DEFAULT_SECTION,
    ConfigClass, ConfigSection,
    ConfigParser, ConfigYamlParser,
    SectionCursor, StaleCursorError
)

__all__ = [
    'DEFAULT_SECTION',
    'ConfigClass', 'ConfigSection', 'SectionCursor', 'StaleCursorError',
    'ConfigParser', 'ConfigYamlParser',
    'ChecksumFile', 'checksum_read', 'checksum_save',
    'config_new_empty', 'config_new', 'config_new_clone', 'config_save'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')


def config_new_empty() -> ConfigClass:
    return ConfigClass()


def config_new(filename: str | PathLike[str]) -> ConfigClass | None:
    """Load a config file. `None` if it is missing or unreadable."""
    return ConfigParser(filename).read()


def config_new_clone(src: ConfigClass) -> ConfigClass:
    return src.clone()


def config_save(config: ConfigClass, filename: str | PathLike[str]) -> bool:
    """Save `config`, overwriting `filename`.

    Comments and formatting of a formerly loaded file are lost.
    """
    return ConfigParser(filename).write(config)
