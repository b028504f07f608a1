"""Mediator: two colleagues exchanging messages only through a mediator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum


class ColleagueType(IntEnum):
    """The slot a colleague occupies in the concrete mediator."""

    CONCRETE1 = 1
    CONCRETE2 = 2


class Mediator(ABC):
    """Passes messages between colleagues so they need not know each other."""

    @abstractmethod
    def send(self, msg: str, colleague: Colleague) -> None:
        """Deliver a message sent by ``colleague`` to its counterpart."""


class Colleague(ABC):
    """A party that talks to others only through its mediator."""

    def __init__(self, mediator: Mediator) -> None:
        self.mediator = mediator

    def send_msg(self, msg: str) -> None:
        """Send a message through the mediator."""
        self.mediator.send(msg, self)

    def _announce(self, msg: str) -> str:
        line = f"{type(self).__name__} reveive msg:{msg}"
        print(line)
        return line

    @abstractmethod
    def receive_msg(self, msg: str) -> str:
        """Handle a message delivered by the mediator."""


class ConcreteColleague1(Colleague):
    def receive_msg(self, msg: str) -> str:
        return self._announce(msg)


class ConcreteColleague2(Colleague):
    def receive_msg(self, msg: str) -> str:
        return self._announce(msg)


class ConcreteMediator(Mediator):
    """A mediator between exactly two colleagues."""

    def __init__(self) -> None:
        self.colleague1: Colleague | None = None
        self.colleague2: Colleague | None = None

    def set_colleague(self, colleague: Colleague, kind: ColleagueType) -> None:
        """Register a colleague in the first slot or, for any other kind, the second."""
        if ColleagueType(kind) is ColleagueType.CONCRETE1:
            self.colleague1 = colleague
        else:
            self.colleague2 = colleague

    def send(self, msg: str, colleague: Colleague) -> None:
        """Deliver to the second colleague if the first sent, else to the first."""
        target = self.colleague2 if colleague is self.colleague1 else self.colleague1
        if target is None:
            raise LookupError("no colleague registered to receive the message")
        target.receive_msg(msg)


def main(argv: list[str] | None = None) -> int:
    """Let two colleagues greet each other; takes no arguments."""
    mediator = ConcreteMediator()
    first = ConcreteColleague1(mediator)
    second = ConcreteColleague2(mediator)
    mediator.set_colleague(first, ColleagueType.CONCRETE1)
    mediator.set_colleague(second, ColleagueType.CONCRETE2)
    first.send_msg("Hello from Colleague1")
    second.send_msg("Hi, this is Colleague2")
    return 0