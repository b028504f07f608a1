import pytest

from patternkit.factory_method import (
    Gender,
    HumanFactory,
    Race,
    UnsupportedRaceError,
    WhiteHuman,
    YellowHuman,
    main,
)


def test_instance_is_shared_and_usable():
    factory = HumanFactory.instance()
    human = HumanFactory.instance().create_human(Gender.FEMALE, Race.YELLOW)
    assert HumanFactory.instance() is factory
    assert human.gender is Gender.FEMALE
    assert human.race is Race.YELLOW


def test_release_gives_new_instance():
    first = HumanFactory.instance()
    HumanFactory.release_instance()
    second = HumanFactory.instance()
    assert first is not second
    assert second is HumanFactory.instance()


def test_create_yellow_male(capsys):
    human = HumanFactory.instance().create_human(Gender.MALE, Race.YELLOW)
    assert isinstance(human, YellowHuman)
    assert human.gender is Gender.MALE
    assert human.race is Race.YELLOW
    assert capsys.readouterr().out == "create a yellow human, the gender is 1\n"


def test_create_white_female(capsys):
    human = HumanFactory.instance().create_human(Gender.FEMALE, Race.WHITE)
    assert isinstance(human, WhiteHuman)
    assert human.race is Race.WHITE
    capsys.readouterr()
    human.walk()
    human.eat()
    assert capsys.readouterr().out.splitlines() == [
        "here is a white human walking",
        "the gender is 2",
        "here is a white human eating",
        "the gender is 2",
    ]


@pytest.mark.parametrize(
    "race, message",
    [
        (Race.BLACK, f"non-support human race:{int(Race.BLACK)}"),
        (Race.MIXED, f"non-support human race:{int(Race.MIXED)}"),
        (Race.UNKNOWN, "unknown human race:0"),
        (42, "unknown human race:"),
    ],
)
def test_unsupported_race(race, message):
    with pytest.raises(UnsupportedRaceError, match=message):
        HumanFactory.instance().create_human(Gender.MALE, race)


def test_main(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "nuwa creates the first batch of yellow human on the first day"
    assert lines.count("create a yellow human, the gender is 1") == 3
    assert lines.count("create a white human, the gender is 2") == 3
    assert lines.count("here is a white human walking") == 6
    assert "nuwa creates the first batch of white human on the second day" in lines