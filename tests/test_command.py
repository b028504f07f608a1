import pytest

from patternkit.command import Chef, Command, OrderCommand, Waiter, main


class _RecordingChef(Chef):
    def __init__(self):
        self.log = []

    def cook(self, dish):
        self.log.append(("cook", dish))

    def cancel_cooking(self, dish):
        self.log.append(("cancel", dish))


class _RecordingCommand(Command):
    def __init__(self):
        self.log = []

    def order(self, dish):
        self.log.append(("order", dish))

    def cancel_order(self, dish):
        self.log.append(("cancel", dish))


def test_chef_reports_cooking(capsys):
    chef = Chef()
    chef.cook("Soup")
    chef.cancel_cooking("Soup")
    assert capsys.readouterr().out.splitlines() == [
        "The chef is cooking Soup",
        "The chef stops cooking Soup",
    ]


def test_order_command_forwards_to_chef():
    chef = _RecordingChef()
    command = OrderCommand(chef)
    command.order("Soup")
    command.cancel_order("Soup")
    assert chef.log == [("cook", "Soup"), ("cancel", "Soup")]


def test_base_command_prints_nothing(capsys):
    command = Command()
    command.order("Soup")
    command.cancel_order("Soup")
    assert capsys.readouterr().out == ""


def test_waiter_announces_then_runs_command(capsys):
    command = _RecordingCommand()
    waiter = Waiter(command)
    waiter.take_order("Soup")
    waiter.cancel_order("Soup")
    assert command.log == [("order", "Soup"), ("cancel", "Soup")]
    assert capsys.readouterr().out.splitlines() == [
        "The Cilent takes order Soup",
        "The Client cancels order Soup",
    ]


def test_waiter_command_can_be_replaced():
    first, second = _RecordingCommand(), _RecordingCommand()
    waiter = Waiter(first)
    waiter.take_order("Soup")
    waiter.command = second
    waiter.take_order("Tea")
    assert first.log == [("order", "Soup")]
    assert second.log == [("order", "Tea")]


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "The Cilent takes order FriedPotatoes",
        "The chef is cooking FriedPotatoes",
        "The Cilent takes order Sandwich",
        "The chef is cooking Sandwich",
        "The Client cancels order Sandwich",
        "The chef stops cooking Sandwich",
    ]


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["unexpected"])