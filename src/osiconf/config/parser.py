# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/02 22:31:47
# @Author : Kariko Lin

"""Reading and saving of `ConfigClass`.

The text format is plain INI, line based:

    ```ini
    # comment, and ; comment too
    loose_key = goes to [Global]
    [Section]
    key = value = with '=' kept
    ```

Comments and formatting are NOT preserved through a read-then-write cycle.
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike
from typing import Any
from warnings import warn

import chardet
import yaml

from .consts import COMMENT_MARKS, DEFAULT_SECTION
from .model import ConfigClass
from ..abstract import FileHandler


class ConfigParser(FileHandler[ConfigClass]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(
        buf: TextIOBase, ins: ConfigClass | None = None
    ) -> ConfigClass:
        """Read from a decoded text stream.

        If `ins` is given, pairs are merged into it instead of a new config.
        """
        if ins is None:
            ins = ConfigClass()
        this_sect = DEFAULT_SECTION
        line_count = 0
        while i := buf.readline():
            line_count += 1
            i = i.strip()
            if not i or i[0] in COMMENT_MARKS:
                continue
            if i[0] == '[' and i[-1] == ']':
                this_sect = i[1:-1]
                if not this_sect:
                    warn(f'Line {line_count}: section declared without name.')
            elif '=' in i:
                key, val = i.split('=', 1)
                ins.set_raw(this_sect, key.strip(), val.strip())
            else:
                logging.debug(f'Line {line_count} is malformed, skipped: {i}')
        return ins

    @classmethod
    def loads(cls, text: str) -> ConfigClass:
        return cls.readstream(StringIO(text))

    @staticmethod
    def dumps(
        instance: ConfigClass, *,
        blank_lines: int = 1,
        delimiter: str = '='
    ) -> str:
        """Canonical text of `instance`.

        `[Global]` is written with its header like any other section.
        """
        buffers = []
        for sect, data in instance.items():
            ret = f'[{sect}]\n'
            for k, v in data.items():
                ret += f'{k}{delimiter}{v}\n'
            buffers.append(ret)
        return ('\n' * blank_lines).join(buffers)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        return StringIO(raw.decode(codec['encoding']))

    def read(self) -> ConfigClass | None:
        """Read the file given on init.

        If the file is NOT FOUND, NOT READABLE or NOT DECODABLE,
        a warning is logged and `None` returned. No partial result.
        """
        try:
            # when encoding got wrong, fallback to `chardet`.
            try:
                with open(self._fn, 'r', encoding=self._codec) as fp:
                    return self.readstream(fp)
            except UnicodeDecodeError:
                return self.readstream(self._decode_file(self._fn))
        except (OSError, UnicodeDecodeError, LookupError) as e:
            logging.warning(f"Unable to load config `{self._fn}`:\n  {e}")
            return None

    def write(
        self, instance: ConfigClass, *,
        blank_lines: int = 1,
        delimiter: str = '='
    ) -> bool:
        """Save to the file given on init, replacing it as a whole.

        Returns `False` on failure, in which case the former file is kept.
        """
        return self._replace_with(
            self.dumps(instance, blank_lines=blank_lines, delimiter=delimiter),
            self._codec)

    def __str__(self) -> str:
        return "Config: " + super().__str__() + f"({self._codec})"


class ConfigYamlParser(FileHandler[ConfigClass]):
    """Dumps a config as `{section: {key: value}}` YAML, and loads it back.

    Handy to inspect, or hand edit, stored state.
    """
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> ConfigClass | None:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                doc: Any = yaml.load(fp, yaml.FullLoader)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logging.warning(f"Unable to load YAML `{self._fn}`:\n  {e}")
            return None

        if doc is None:
            return ConfigClass()
        if not isinstance(doc, dict) or not all(
            isinstance(i, dict) or i is None for i in doc.values()
        ):
            logging.warning(
                f"`{self._fn}` is not a mapping of sections, skipped.")
            return None
        ret = ConfigClass()
        for sect, pairs in doc.items():
            # may there be some pure digits considered as int
            for k, v in (pairs or {}).items():
                ret.set_raw(str(sect), str(k), '' if v is None else str(v))
        return ret

    def write(self, instance: ConfigClass, indent: int = 2) -> bool:
        buf = yaml.safe_dump(
            {sect: data.to_dict() for sect, data in instance.items()},
            allow_unicode=True,
            default_style='"',
            indent=indent,
            sort_keys=False)
        return self._replace_with(buf, self._codec)
