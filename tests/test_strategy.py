import pytest

from patternkit.strategy import BackDoor, Context, GivenGreenLight, Strategy, main


def test_back_door_operates(capsys):
    BackDoor().operate()
    assert capsys.readouterr().out == "Go the backdoor\n"


def test_green_light_operates(capsys):
    GivenGreenLight().operate()
    assert capsys.readouterr().out == "Ask for a green light\n"


@pytest.mark.parametrize("strategy_class", [BackDoor, GivenGreenLight])
def test_context_open_matches_strategy(capsys, strategy_class):
    strategy_class().operate()
    direct = capsys.readouterr().out
    Context(strategy_class()).open()
    assert capsys.readouterr().out == direct


def test_empty_context(capsys):
    Context(None).open()
    assert capsys.readouterr().out == "An empty context\n"


def test_strategy_can_be_swapped(capsys):
    context = Context(BackDoor())
    context.strategy = GivenGreenLight()
    context.open()
    assert capsys.readouterr().out == "Ask for a green light\n"


def test_strategy_is_abstract():
    with pytest.raises(TypeError):
        Strategy()


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Here is the first appointment place",
        "Go the backdoor",
        "Here is the second appointment place",
        "Ask for a green light",
    ]