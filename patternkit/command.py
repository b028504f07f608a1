"""Command: a waiter passing orders to a chef through command objects."""

from __future__ import annotations

import argparse


class Chef:
    """The receiver that actually prepares dishes."""

    def cook(self, dish: str) -> None:
        print(f"The chef is cooking {dish}")

    def cancel_cooking(self, dish: str) -> None:
        print(f"The chef stops cooking {dish}")


class Command:
    """An order that can be placed or cancelled; the base command does nothing."""

    def order(self, dish: str) -> None:
        """Place an order for a dish."""

    def cancel_order(self, dish: str) -> None:
        """Cancel the order for a dish."""


class OrderCommand(Command):
    """Forwards orders to a chef."""

    def __init__(self, chef: Chef) -> None:
        self.chef = chef

    def order(self, dish: str) -> None:
        self.chef.cook(dish)

    def cancel_order(self, dish: str) -> None:
        self.chef.cancel_cooking(dish)


class Waiter:
    """The invoker: takes the client's orders and runs its command."""

    def __init__(self, command: Command) -> None:
        self.command = command

    def take_order(self, dish: str) -> None:
        print(f"The Cilent takes order {dish}")
        self.command.order(dish)

    def cancel_order(self, dish: str) -> None:
        print(f"The Client cancels order {dish}")
        self.command.cancel_order(dish)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Order two dishes and cancel one.")
    parser.parse_args(argv)
    waiter = Waiter(OrderCommand(Chef()))
    waiter.take_order("FriedPotatoes")
    waiter.take_order("Sandwich")
    waiter.cancel_order("Sandwich")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())