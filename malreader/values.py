"""
Value model for the reader.

Each parsed form becomes one of the dataclasses below. Containers own
their children directly; only data values are ever stored in them.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Union


# Integers are unsigned 64-bit
INTEGER_MAX = 2 ** 64 - 1


class ValueType(Enum):
    """Value variants."""
    NIL = auto()
    BOOLEAN = auto()
    INTEGER = auto()
    STRING = auto()       # Raw quoted text, quotes included
    KEYWORD = auto()      # :name, colon included
    SYMBOL = auto()
    LIST = auto()         # (a b c)
    VECTOR = auto()       # [a b c]


@dataclass
class MalNil:
    value_type: ValueType = field(default=ValueType.NIL, init=False, repr=False)

    def __repr__(self):
        return "Nil"


@dataclass
class MalBoolean:
    value: bool
    value_type: ValueType = field(default=ValueType.BOOLEAN, init=False, repr=False)


@dataclass
class MalInteger:
    value: int
    value_type: ValueType = field(default=ValueType.INTEGER, init=False, repr=False)


@dataclass
class MalString:
    value: str
    value_type: ValueType = field(default=ValueType.STRING, init=False, repr=False)


@dataclass
class MalKeyword:
    value: str
    value_type: ValueType = field(default=ValueType.KEYWORD, init=False, repr=False)

    @property
    def name(self) -> str:
        """Keyword name without the leading colon."""
        return self.value[1:] if self.value.startswith(':') else self.value


@dataclass
class MalSymbol:
    value: str
    value_type: ValueType = field(default=ValueType.SYMBOL, init=False, repr=False)


@dataclass
class MalList:
    items: List['MalValue'] = field(default_factory=list)
    value_type: ValueType = field(default=ValueType.LIST, init=False, repr=False)

    def __len__(self):
        return len(self.items)


@dataclass
class MalVector:
    items: List['MalValue'] = field(default_factory=list)
    value_type: ValueType = field(default=ValueType.VECTOR, init=False, repr=False)

    def __len__(self):
        return len(self.items)


MalValue = Union[MalNil, MalBoolean, MalInteger, MalString, MalKeyword,
                 MalSymbol, MalList, MalVector]

CONTAINERS = (MalList, MalVector)
