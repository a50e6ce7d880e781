import io
from unittest import mock

import pytest

from ashfall.engine import (
    Game,
    StoryEnded,
    clear_screen,
    option_letter,
    print_slow,
    to_upper,
)
from ashfall.nodes import get_node


def _game(text):
    out = io.StringIO()
    return Game(io.StringIO(text), out, delay_us=0), out


def test_clear_screen_escape_sequence():
    out = io.StringIO()
    clear_screen(out)
    assert out.getvalue() == "\033[2J\033[H"


def test_to_upper():
    assert to_upper("b") == "B"
    assert to_upper("Ab") == "AB"


@pytest.mark.parametrize("index,letter", [(0, "A"), (1, "B"), (2, "C"), (3, "D")])
def test_option_letter(index, letter):
    assert option_letter(index) == letter


@pytest.mark.parametrize("index", [-1, 4])
def test_option_letter_out_of_range(index):
    with pytest.raises(IndexError):
        option_letter(index)


def test_print_slow_writes_text_and_pauses_per_character():
    out = io.StringIO()
    with mock.patch("time.sleep") as sleep:
        print_slow("ash", 50000, out)
    assert out.getvalue() == "ash"
    assert sleep.call_count == 3
    assert sleep.call_args == mock.call(0.05)


def test_input_exhausted_raises_story_ended():
    game, out = _game("")
    with pytest.raises(StoryEnded):
        game.run_node(0)
    assert get_node(0).text in out.getvalue()
    assert "A. Head south to the forest's surviving edge\n" in out.getvalue()


def test_unused_slot_is_not_a_valid_choice():
    game, out = _game("c\n")
    with pytest.raises(StoryEnded):
        game.run_node(0)
    assert "Invalid choice" in out.getvalue()


def test_leaf_scene_accepts_nothing():
    game, out = _game("a\nb\n")
    with pytest.raises(StoryEnded):
        game.run_node(3)
    assert out.getvalue().count("Invalid choice") == 2


def test_lowercase_choice_enters_farm_exploration():
    game, out = _game("b\n")
    with pytest.raises(StoryEnded):
        game.run_node(0)
    assert get_node(2).text in out.getvalue()
    assert "D. Enter the house\n" in out.getvalue()


def test_visited_options_are_hidden_and_rejected():
    game, out = _game("a\n\na\n")
    with pytest.raises(StoryEnded):
        game.run_node(2)
    text = out.getvalue()
    assert get_node(7).text in text
    later = text.split("You have more to explore here. What do you want to check?\n\n", 1)[1]
    assert "A. Check the crops" not in later
    assert "B. Inspect the well\n" in later
    assert later.endswith("Invalid choice. Try again.\n\n> ")


def test_exploration_order_does_not_matter():
    game, out = _game("d\n\nb\n\na\n\nc\n\n\n")
    with pytest.raises(KeyError):
        game.run_exploration_node(1, 4, 11)
    text = out.getvalue()
    for node_id in (3, 4, 5, 6):
        assert get_node(node_id).text in text
    assert text.count("(Press Enter to continue...)") == 5