import pytest

from raycube.colors import lookup_color


def test_plain_name():
    assert lookup_color("snow") == 0xFFFAFA


def test_none_means_transparent():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_unknown_name_gives_none():
    assert lookup_color("no such colour") is None
    assert lookup_color("") is None


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    gray = lookup_color(f"gray{level}")
    assert gray is not None
    assert gray == lookup_color(f"grey{level}")


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("alice blue", "aliceblue"),
        ("lemon chiffon", "lemonchiffon"),
        ("dark orange", "darkorange"),
        ("light green", "lightgreen"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


def test_numbered_variant_one_matches_base():
    for base in ("red", "snow", "bisque", "gold", "orange"):
        assert lookup_color(f"{base}1") == lookup_color(base)


def test_extremes_of_the_gray_scale():
    assert lookup_color("gray0") == lookup_color("black")
    assert lookup_color("gray100") == lookup_color("white")


@pytest.mark.parametrize(
    "name", ["red", "blue", "navy", "cyan", "thistle4", "darkred", "gray37"]
)
def test_values_fit_in_24_bits(name):
    value = lookup_color(name)
    assert value is not None
    assert 0 <= value <= 0xFFFFFF