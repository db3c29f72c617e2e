# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/11/02 21:40:12
# @Author : Kariko Lin

import logging
import os
from abc import ABCMeta, abstractmethod
from os.path import abspath, dirname
from tempfile import mkstemp
from typing import TypeVar

T = TypeVar('T')


class FileHandler[T](metaclass=ABCMeta):
    """Reads a `T` from, or writes it to, the file given on init.

    Handlers never raise on IO trouble: `read()` gives `None`
    and `write()` gives `False`, with a warning logged.
    """
    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self._fn = os.fspath(filename)

    @abstractmethod
    def read(self) -> T | None:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> bool:
        raise NotImplementedError

    def _replace_with(self, content: str, encoding: str | None) -> bool:
        """Write `content` into a sibling temp file, then swap it in.

        The target is either fully replaced or left untouched.
        """
        folder = dirname(abspath(self._fn))
        tmp, done = None, False
        try:
            fd, tmp = mkstemp(prefix='.osiconf-', suffix='.tmp', dir=folder)
            with os.fdopen(fd, 'w', encoding=encoding, newline='\n') as fp:
                fp.write(content)
                fp.flush()
                os.fsync(fp.fileno())
            os.replace(tmp, self._fn)
            done = True
        # ValueError: content not encodable with `encoding`.
        except (OSError, ValueError) as e:
            logging.warning(f"Unable to save `{self._fn}`:\n  {e}")
        finally:
            if not done and tmp is not None and os.path.exists(tmp):
                os.remove(tmp)
        return done

    def __str__(self) -> str:
        return self._fn
