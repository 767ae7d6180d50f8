import pytest

from searchrace.action import Action


def test_str_format():
    assert str(Action(200, -14)) == "200,-14"


def test_parse():
    assert Action.parse("200,-14") == Action(200, -14)


@pytest.mark.parametrize("thrust, angle", [(0, 18), (200, -18), (116, 0), (1, 1)])
def test_round_trip(thrust, angle):
    action = Action(thrust, angle)
    assert Action.parse(str(action)) == action


def test_parse_missing_angle_defaults_to_zero():
    assert Action.parse("150") == Action(150, 0)


def test_parse_empty_defaults_to_zero():
    assert Action.parse("") == Action(0, 0)


def test_parse_invalid_parts_default_to_zero():
    assert Action.parse("abc,5") == Action(0, 5)
    assert Action.parse("7,xyz") == Action(7, 0)


def test_parse_ignores_extra_parts():
    assert Action.parse("1,2,3") == Action(1, 2)


def test_parse_rejects_surrounding_whitespace():
    assert Action.parse(" 5,6") == Action(0, 6)


def test_parse_out_of_range_defaults_to_zero():
    assert Action.parse("99999999999,3") == Action(0, 3)


def test_command_string_round_trip():
    command = "200,-14;200,-1;200,14;176,0;0,18"
    actions = [Action.parse(part) for part in command.split(";")]
    assert ";".join(str(a) for a in actions) == command