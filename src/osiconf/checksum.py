# -*- encoding: utf-8 -*-
# @File   : checksum.py
# @Time   : 2024/11/03 00:12:26
# @Author : Kariko Lin

"""Checksum files saved next to config files.

The checksum is computed (and verified) by the caller.
Here we only keep the string, without looking at the config itself.
"""

import logging
from os import PathLike

from .abstract import FileHandler

__all__ = ['ChecksumFile', 'checksum_read', 'checksum_save']


class ChecksumFile(FileHandler[str]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> str | None:
        try:
            with open(self._fn, 'r', encoding=self._codec, newline='') as fp:
                return fp.read()
        except (OSError, UnicodeDecodeError) as e:
            logging.warning(f"Unable to read checksum `{self._fn}`:\n  {e}")
            return None

    def write(self, instance: str) -> bool:
        """Overwrites the file with `instance`, as is."""
        return self._replace_with(instance, self._codec)


def checksum_read(filename: str | PathLike[str]) -> str:
    """The saved checksum, or an empty string if unreadable."""
    ret = ChecksumFile(filename).read()
    return '' if ret is None else ret


def checksum_save(checksum: str, filename: str | PathLike[str]) -> bool:
    return ChecksumFile(filename).write(checksum)
