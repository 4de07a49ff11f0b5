"""enum-like type"""
# Adapted from the Python Cookbook, http://code.activestate.com/recipes/67107/
#

from typing import Dict, Iterator, List, Optional, Tuple, Union
from Nmc.exceptions import EnumException


class Enumeration:
    """Create a C like enumerated list.

    Entries are either a bare name, which takes the value after the previous
    entry, or a ``(name, value)`` tuple which resets the counter.
    """

    def __init__(self, name: str, enum_list: List[Union[Tuple[str, int], str]]):
        self.__doc__ = name
        lookup: Dict[str, int] = {}
        reverse_lookup: Dict[int, str] = {}
        i: int = 0
        for j in enum_list:
            if isinstance(j, tuple):
                j, i = j
            if j in lookup:
                raise EnumException("enum name is not unique: " + j)
            if i in reverse_lookup:
                raise EnumException("enum value is not unique for " + j)
            lookup[j] = i
            reverse_lookup[i] = j
            i = i + 1
        self.lookup: Dict[str, int] = lookup
        self.reverse_lookup: Dict[int, str] = reverse_lookup

    def __getattr__(self, attr: str) -> int:
        if attr.startswith("__") or attr not in self.lookup:
            raise AttributeError(attr)
        return self.lookup[attr]

    def __contains__(self, value: object) -> bool:
        return value in self.reverse_lookup

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(self.lookup.items())

    def __len__(self) -> int:
        return len(self.lookup)

    def whatis(self, value: int, default: Optional[str] = None) -> str:
        """Conducts a reverse lookup of the str using the int"""
        if value in self.reverse_lookup:
            return self.reverse_lookup[value]
        if default is None:
            raise KeyError(value)
        return default
