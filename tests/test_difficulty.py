import pytest

from starterkit.guess.difficulty import Difficulty, parse_difficulty


@pytest.mark.parametrize(
    "text, expected",
    [
        ("easy", Difficulty.EASY),
        ("E", Difficulty.EASY),
        ("Medium", Difficulty.MEDIUM),
        ("m", Difficulty.MEDIUM),
        ("HARD", Difficulty.HARD),
        ("h", Difficulty.HARD),
        ("custom", Difficulty.CUSTOM),
        ("c", Difficulty.CUSTOM),
    ],
)
def test_parse(text, expected):
    assert parse_difficulty(text) is expected


@pytest.mark.parametrize("text", ["", "extreme", " easy"])
def test_parse_unknown(text):
    with pytest.raises(ValueError, match="unknown difficulty"):
        parse_difficulty(text)


@pytest.mark.parametrize(
    "level, bounds",
    [
        (Difficulty.EASY, (1, 10)),
        (Difficulty.MEDIUM, (1, 50)),
        (Difficulty.HARD, (1, 100)),
        (Difficulty.CUSTOM, (1, 1000)),
    ],
)
def test_bounds(level, bounds):
    assert level.bounds() == bounds


def test_str_round_trips_through_parse():
    for level in Difficulty:
        assert parse_difficulty(str(level)) is level