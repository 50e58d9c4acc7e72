from enum import Enum
from typing import Union

from bindery.domain.exceptions import UnknownKindError


class BindingKind(str, Enum):
    """Defines how a bound value is turned into a live object.

    Attributes:
        CLASS: Constructed fresh on every resolution.
        SINGLETON: Constructed once, cached and reused.
        FACTORY: Zero-argument function invoked on every resolution.
    """

    CLASS = "class"
    SINGLETON = "singleton"
    FACTORY = "factory"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, kind: Union["BindingKind", str]) -> "BindingKind":
        """Coerce an enum member or its string value into a BindingKind.

        Raises:
            UnknownKindError: If the value names no known kind.
        """
        if isinstance(kind, cls):
            return kind
        try:
            return cls(kind)
        except ValueError as e:
            raise UnknownKindError(kind) from e
