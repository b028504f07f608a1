"""Prototype: message decorators created by cloning registered prototypes."""

from __future__ import annotations

import argparse
import copy
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import ClassVar


class DecoratorType(IntEnum):
    UNKNOWN = 0
    UNDERLINE = 1
    SLASH_BOX = 2
    DASH_BOX = 3


def _check_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"decoration must be a single character, got {char!r}")
    return char


class MessageDecorator(ABC):
    """Prints a message with some decoration and can copy itself."""

    @abstractmethod
    def use(self, msg: str) -> None:
        """Print the decorated message."""

    def clone(self) -> MessageDecorator:
        """Return an independent copy of this decorator."""
        return copy.copy(self)


class UnderlinePen(MessageDecorator):
    """Prints the message in quotes, underlined."""

    def __init__(self, char: str) -> None:
        self.char = _check_char(char)

    def use(self, msg: str) -> None:
        print(f'"{msg}"')
        print(self.char * (len(msg) + 2))

    def clone(self) -> UnderlinePen:
        return UnderlinePen(self.char)


class MessageBox(MessageDecorator):
    """Prints the message inside a box."""

    def __init__(self, char: str) -> None:
        self.char = _check_char(char)

    def use(self, msg: str) -> None:
        border = self.char * (len(msg) + 4)
        print(border)
        print(f"{self.char} {msg} {self.char}")
        print(border)

    def clone(self) -> MessageBox:
        return MessageBox(self.char)


class DecoratorManager:
    """The shared registry of prototypes, reached through :meth:`instance`."""

    _instance: ClassVar[DecoratorManager | None] = None

    def __init__(self) -> None:
        self._prototypes: dict[DecoratorType, MessageDecorator] = {}

    @classmethod
    def instance(cls) -> DecoratorManager:
        """Return the shared registry, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def release_instance(cls) -> None:
        """Drop the shared registry and its prototypes."""
        if cls._instance is not None:
            cls._instance._prototypes.clear()
            cls._instance = None

    def register(self, kind: DecoratorType, decorator: MessageDecorator) -> None:
        """Register a prototype; a kind already registered keeps its first prototype."""
        self._prototypes.setdefault(DecoratorType(kind), decorator)

    def create(self, kind: DecoratorType) -> MessageDecorator:
        """Return a fresh clone of the prototype registered for ``kind``."""
        try:
            prototype = self._prototypes[DecoratorType(kind)]
        except KeyError:
            raise KeyError(f"no decorator registered for {kind!r}") from None
        return prototype.clone()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Decorate a message with cloned pens.")
    parser.parse_args(argv)
    manager = DecoratorManager.instance()
    manager.register(DecoratorType.UNDERLINE, UnderlinePen("~"))
    manager.register(DecoratorType.SLASH_BOX, MessageBox("-"))
    msg = "Hello World"
    manager.create(DecoratorType.UNDERLINE).use(msg)
    manager.create(DecoratorType.SLASH_BOX).use(msg)
    DecoratorManager.release_instance()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())