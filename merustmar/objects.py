"""Runtime values produced by evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class ObjectType(Enum):
    """The kind of a runtime value."""

    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    RETURN_VALUE = "RETURN_VALUE"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value


class _Value:
    object_type: ClassVar[ObjectType]

    def inspect(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.inspect()


@dataclass(frozen=True)
class Integer(_Value):
    """A signed integer value."""

    value: int
    object_type: ClassVar[ObjectType] = ObjectType.INTEGER

    def inspect(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean(_Value):
    """A boolean value."""

    value: bool
    object_type: ClassVar[ObjectType] = ObjectType.BOOLEAN

    def inspect(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Null(_Value):
    """The absence of a value."""

    object_type: ClassVar[ObjectType] = ObjectType.NULL

    def inspect(self) -> str:
        return "null"


@dataclass(frozen=True)
class ReturnValue(_Value):
    """A value being carried out of a block by a return statement."""

    value: Object
    object_type: ClassVar[ObjectType] = ObjectType.RETURN_VALUE

    def inspect(self) -> str:
        return self.value.inspect()


@dataclass(frozen=True)
class ErrorObject(_Value):
    """A runtime error with its message."""

    message: str
    object_type: ClassVar[ObjectType] = ObjectType.ERROR

    def inspect(self) -> str:
        return self.message


Object = Union[Integer, Boolean, Null, ReturnValue, ErrorObject]

NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)