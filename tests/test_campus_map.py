import pytest

from dsakit.campus_map import Campus, render_map


def test_links_are_reciprocal():
    root = Campus("A", 5)
    north = root.add_north("N", 1)
    south = root.add_south("S", 2)
    east = root.add_east("E", 3)
    west = root.add_west("W", 4)
    assert north.south is root and root.north is north
    assert south.north is root and root.south is south
    assert east.west is root and root.east is east
    assert west.east is root and root.west is west


@pytest.mark.parametrize(
    "method, side",
    [
        ("add_north", "north"),
        ("add_south", "south"),
        ("add_east", "east"),
        ("add_west", "west"),
    ],
)
def test_occupied_side_raises(method, side):
    root = Campus("A", 5)
    first = getattr(root, method)("B", 1)
    with pytest.raises(ValueError):
        getattr(root, method)("C", 2)
    assert getattr(root, side) is first


def test_render_lone_campus():
    assert render_map(Campus("A", 5), 1) == (
        "City: A (5 )\n"
        "   North / Atas: -\n"
        "   East / Kanan: -\n"
        "   South / Bawah : -\n"
        "   West / Kiri: -\n"
    )


def test_render_stops_past_max_level():
    root = Campus("A", 5)
    root.add_north("B", 3)
    lines = render_map(root, 0).splitlines()
    assert lines[1] == "   North / Atas: B (3 )"
    assert len(lines) == 5


def test_visited_campus_not_expanded_again():
    root = Campus("A", 5)
    root.add_north("B", 3)
    text = render_map(root, 5)
    lines = text.splitlines()
    assert "      South / Bawah : A (5 )" in lines
    assert text.count("North / Atas:") == 2


def test_render_is_repeatable():
    root = Campus("Binus Anggrek", 1000)
    root.add_south("Binus Syahdan", 500)
    root.add_north("Kantin Payung", 10)
    root.add_east("Family Mart", 20)
    root.south.add_west("Binus Kijang", 200)
    first = render_map(root, 1)
    assert render_map(root, 1) == first
    assert first.startswith("City: Binus Anggrek (1000 )\n")
    assert "Binus Kijang (200 )" in first