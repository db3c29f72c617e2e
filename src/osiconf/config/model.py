# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 21:58:03
# @Author : Kariko Lin

"""
Basically INI Structure, flat and string-only.

- Pairs before any section header belong to `[Global]`.
- Sections declared twice are merged; later pairs override earlier ones.
- A section without pairs does not exist, as far as queries are concerned.
- Everything is case sensitive.
"""

import operator
import re
from collections.abc import Mapping, MutableMapping
from functools import cmp_to_key
from typing import Callable, Iterator

from .consts import (
    DEFAULT_SECTION,
    BoolLiteral,
    INT_RANGE, UINT16_RANGE, UINT64_RANGE
)

# what strtol(..., base=0) takes: 0x-hex, 0-octal or decimal.
_INTEGRAL = re.compile(
    r'(?P<sign>[+-]?)'
    r'(?:0[xX](?P<hex>[0-9a-fA-F]+)|(?P<oct>0[0-7]*)|(?P<dec>[1-9][0-9]*))'
)

type EntryComparator = Callable[[str, str], int]


class StaleCursorError(Exception):
    """A `SectionCursor` got used after its config was modified."""
    pass


def _ensure_str(*args: object) -> None:
    for i in args:
        if not isinstance(i, str):
            raise TypeError(
                f'config names and values should be `str`, got {type(i)!r}')


def _parse_integral(raw: str | None, bounds: tuple[int, int]) -> int | None:
    if raw is None or (m := _INTEGRAL.fullmatch(raw)) is None:
        return None
    if m['hex'] is not None:
        val = int(m['hex'], 16)
    elif m['oct'] is not None:
        val = int(m['oct'], 8)
    else:
        val = int(m['dec'])
    if m['sign'] == '-':
        val = -val
    lo, hi = bounds
    return val if lo <= val <= hi else None


class ConfigSection(MutableMapping[str, str]):
    """... is a dict of `str: str` pairs, kept in insertion order.

    Overriding an existing key keeps its position.

    Changes made here are seen by the owning `ConfigClass`.
    Once the section is dropped from it (removed, or emptied),
    the section is detached and further changes stay local.
    """
    def __init__(
        self, section_name: str,
        pairs: Mapping[str, str] | None = None, /,
        owner: 'ConfigClass | None' = None
    ) -> None:
        self._name = section_name
        self._data: dict[str, str] = {}
        if pairs:
            for k, v in pairs.items():
                _ensure_str(k, v)
                self._data[k] = v
        self._owner = owner

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        _ensure_str(key, value)
        self._data[key] = value
        if self._owner is not None:
            self._owner._section_changed(self)

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        if self._owner is not None:
            self._owner._section_changed(self)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()

    def sort_pairs(self, compare: EntryComparator) -> None:
        """Stable sort of pairs by key, with a `strcmp`-like `compare`."""
        keys = sorted(self._data, key=cmp_to_key(compare))
        self._data = {k: self._data[k] for k in keys}
        if self._owner is not None:
            self._owner._section_changed(self)


class SectionCursor:
    """Position within the sections of a `ConfigClass`.

    Get one from `section_begin()` or `section_end()`.
    Any change to the config invalidates every cursor issued before,
    and using them afterwards raises `StaleCursorError`.

        ```python
        it = conf.section_begin()
        while it != conf.section_end():
            print(it.name)
            it = it.next()
        ```
    """
    def __init__(self, config: 'ConfigClass', index: int) -> None:
        self._config = config
        self._generation = config._generation
        # shared by every cursor of the same generation.
        self._names = config._section_names()
        self._index = min(index, len(self._names))

    def _check(self) -> None:
        if self._generation != self._config._generation:
            raise StaleCursorError(
                'the config has been modified since this cursor was issued.')

    @property
    def is_end(self) -> bool:
        self._check()
        return self._index >= len(self._names)

    @property
    def name(self) -> str:
        if self.is_end:
            raise IndexError('the end cursor refers to no section.')
        return self._names[self._index]

    def next(self) -> 'SectionCursor':
        if self.is_end:
            raise IndexError('unable to advance past the end cursor.')
        return SectionCursor(self._config, self._index + 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SectionCursor):
            return NotImplemented
        self._check()
        other._check()
        return self._config is other._config and self._index == other._index

    def __hash__(self) -> int:
        return hash((id(self._config), self._generation, self._index))

    def __repr__(self) -> str:
        if self._generation != self._config._generation:
            return '<SectionCursor (stale)>'
        if self._index >= len(self._names):
            return '<SectionCursor (end)>'
        return f'<SectionCursor [{self._names[self._index]}]>'


class ConfigClass(MutableMapping[str, ConfigSection]):
    """... is an ordered group of `ConfigSection`,
    representing a whole config file.

        ```ini
        key = val  ; goes to [Global]

        [section]
        key233 = val666
        [section]  ; merged into the former one
        key233 = val114514
        ```

    Besides the mapping interface, there are typed accessors
    (`get_int()`, `set_bool()`, ...) which fall back to a given
    default whenever the pair is missing or its value does not convert.
    """
    def __init__(self) -> None:
        """Init an empty config."""
        # never holds an empty section.
        self.__raw: dict[str, ConfigSection] = {}
        self._generation = 0
        self.__names: tuple[str, ...] = ()
        self.__names_generation = 0

    def _touch(self) -> None:
        self._generation += 1

    def _section_names(self) -> tuple[str, ...]:
        if self.__names_generation != self._generation:
            self.__names = tuple(self.__raw)
            self.__names_generation = self._generation
        return self.__names

    def _section_changed(self, section: ConfigSection) -> None:
        """Called by owned sections after they got modified."""
        self._touch()
        current = self.__raw.get(section.name)
        if current is section:
            if len(section) == 0:
                self.__drop(section.name)
        elif len(section) > 0:
            # an empty one from `setdefault()` got its first pair.
            if current is None:
                self.__raw[section.name] = section
            else:
                current._data.update(section._data)
                section._owner = None

    def __drop(self, name: str) -> ConfigSection:
        section = self.__raw.pop(name)
        section._owner = None
        return section

    def __getitem__(self, key: str) -> ConfigSection:
        return self.__raw[key]

    def __setitem__(
        self, key: str, value: ConfigSection | Mapping[str, str]
    ) -> None:
        _ensure_str(key)
        # shouldn't keep ptr to external dict in key setting operation.
        section = ConfigSection(
            key,
            value.to_dict() if isinstance(value, ConfigSection) else value,
            owner=self)
        if key in self.__raw:
            self.__drop(key)
        if len(section) > 0:
            self.__raw[key] = section
        self._touch()

    def __delitem__(self, key: str) -> None:
        self.__drop(key)
        self._touch()

    def setdefault(
        self, key: str,
        default: ConfigSection | Mapping[str, str] | None = None
    ) -> ConfigSection:
        """Get section `key`, adding it with `default` pairs if missing.

        The returned section is always bound to this config. If it is
        still empty, it joins the config once it gets its first pair.
        """
        if key in self.__raw:
            return self.__raw[key]
        _ensure_str(key)
        section = ConfigSection(
            key,
            default.to_dict() if isinstance(default, ConfigSection)
            else default,
            owner=self)
        if len(section) > 0:
            self.__raw[key] = section
            self._touch()
        return section

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return 'ConfigClass(%s)' % ', '.join(
            repr(i) for i in self.__raw.values())

    def __copy__(self) -> 'ConfigClass':
        return self.clone()

    def __deepcopy__(self, memo: dict[int, object]) -> 'ConfigClass':
        return self.clone()

    def clone(self) -> 'ConfigClass':
        """Deep copy. Changes to either copy are not seen by the other."""
        ret = ConfigClass()
        for name, section in self.__raw.items():
            ret.__raw[name] = ConfigSection(name, section._data, owner=ret)
        ret._touch()
        return ret

    def clear(self) -> None:
        for name in list(self.__raw):
            self.__drop(name)
        self._touch()

    # raw entry operations

    def has_section(self, section: str) -> bool:
        return section in self.__raw

    def has_key(self, section: str, key: str) -> bool:
        return section in self.__raw and key in self.__raw[section]

    def get_raw(self, section: str, key: str) -> str | None:
        if section not in self.__raw:
            return None
        return self.__raw[section].get(key)

    def set_raw(self, section: str, key: str, value: str) -> None:
        """Add the pair, or override the value in place if it exists."""
        _ensure_str(section, key, value)
        if section not in self.__raw:
            self.__raw[section] = ConfigSection(section, owner=self)
        self.__raw[section][key] = value

    def remove_key(self, section: str, key: str) -> bool:
        if not self.has_key(section, key):
            return False
        del self.__raw[section][key]
        return True

    def remove_section(self, section: str) -> bool:
        if section not in self.__raw:
            return False
        del self[section]
        return True

    def sort_entries(self, compare: EntryComparator) -> None:
        """Sort pairs of each section by key. See `ConfigSection.sort_pairs`.

        `compare` is only used during this call.
        """
        for i in self.__raw.values():
            i.sort_pairs(compare)

    # typed accessors

    def get_string(
        self, section: str, key: str, default: str | None = None
    ) -> str | None:
        ret = self.get_raw(section, key)
        return default if ret is None else ret

    def set_string(self, section: str, key: str, value: str) -> None:
        self.set_raw(section, key, value)

    def get_bool(self, section: str, key: str, default: bool) -> bool:
        match self.get_raw(section, key):
            case BoolLiteral.TRUE:
                return True
            case BoolLiteral.FALSE:
                return False
            case _:
                return default

    def set_bool(self, section: str, key: str, value: bool) -> None:
        self.set_raw(
            section, key,
            (BoolLiteral.TRUE if value else BoolLiteral.FALSE).value)

    def __get_integral(
        self, section: str, key: str,
        default: int, bounds: tuple[int, int]
    ) -> int:
        ret = _parse_integral(self.get_raw(section, key), bounds)
        return default if ret is None else ret

    def __set_integral(
        self, section: str, key: str,
        value: int, bounds: tuple[int, int]
    ) -> None:
        # TypeError for floats and such, rather than truncating.
        value = operator.index(value)
        lo, hi = bounds
        if not lo <= value <= hi:
            raise ValueError(f'{value} is out of range [{lo}, {hi}].')
        self.set_raw(section, key, str(value))

    def get_int(self, section: str, key: str, default: int) -> int:
        return self.__get_integral(section, key, default, INT_RANGE)

    def set_int(self, section: str, key: str, value: int) -> None:
        self.__set_integral(section, key, value, INT_RANGE)

    def get_uint16(self, section: str, key: str, default: int) -> int:
        return self.__get_integral(section, key, default, UINT16_RANGE)

    def set_uint16(self, section: str, key: str, value: int) -> None:
        self.__set_integral(section, key, value, UINT16_RANGE)

    def get_uint64(self, section: str, key: str, default: int) -> int:
        return self.__get_integral(section, key, default, UINT64_RANGE)

    def set_uint64(self, section: str, key: str, value: int) -> None:
        self.__set_integral(section, key, value, UINT64_RANGE)

    # section iteration

    def section_begin(self) -> SectionCursor:
        return SectionCursor(self, 0)

    def section_end(self) -> SectionCursor:
        return SectionCursor(self, len(self))

    @property
    def header(self) -> ConfigSection | None:
        """Pairs placed before any section, i.e. `[Global]`."""
        return self.__raw.get(DEFAULT_SECTION)
