"""Terminal play: printing scenes and reading the player's choices."""

from __future__ import annotations

import sys
import time
from typing import TextIO

from .nodes import END, MAX_OPTIONS, get_node

_LETTERS = ("A", "B", "C", "D")
_CLEAR = "\033[2J\033[H"
DEFAULT_DELAY_US = 50000

# Scenes that are explored option by option, with the node that follows them.
_EXPLORATIONS = {
    1: (1, 4, 11),
    2: (2, 4, 12),
}


class StoryEnded(Exception):
    """Raised when the player's input runs out before the story is over."""


def clear_screen(out: TextIO) -> None:
    """Clear the terminal and move the cursor home."""
    out.write(_CLEAR)


def to_upper(text: str) -> str:
    """Return the text in upper case."""
    return text.upper()


def option_letter(index: int) -> str:
    """Return the letter label of an option slot (0 is A, 1 is B, ...)."""
    if not 0 <= index < MAX_OPTIONS:
        raise IndexError(f"option index {index} out of range")
    return _LETTERS[index]


def print_slow(text: str, delay_us: int, out: TextIO) -> None:
    """Write the text one character at a time, pausing after each."""
    pause = delay_us / 1_000_000
    for char in text:
        out.write(char)
        out.flush()
        time.sleep(pause)


class Game:
    """A game session reading choices from one stream and writing to another."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        delay_us: int = DEFAULT_DELAY_US,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.delay_us = delay_us

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise StoryEnded("input ended")
        return line.split("\n", 1)[0]

    def _read_choice(self) -> str:
        self._write("\n> ")
        return to_upper(self._read_line())

    def run_node(self, start_id: int) -> None:
        """Play the story from the given node until it ends."""
        current = start_id
        while True:
            if current in _EXPLORATIONS:
                self.run_exploration_node(*_EXPLORATIONS[current])
                return

            node = get_node(current)
            clear_screen(self.stdout)
            print_slow(node.text, self.delay_us, self.stdout)
            choices = node.choices()
            for slot, label, _ in choices:
                self._write(f"{option_letter(slot)}. {label}\n")

            targets = {option_letter(slot): target for slot, _, target in choices}
            while True:
                answer = self._read_choice()
                if answer in targets:
                    break
                self._write("\nInvalid choice. Try again.\n")

            if targets[answer] == END:
                self._write("\nThe story ends here. Thank you for playing.\n")
                return
            current = targets[answer]

    def run_exploration_node(
        self, base_node_id: int, option_count: int, next_node_id: int
    ) -> None:
        """Let the player visit every option of a scene, then move on."""
        node = get_node(base_node_id)
        open_slots = {
            option_letter(slot): (slot, target)
            for slot, _, target in node.choices()
            if slot < option_count
        }
        remaining = option_count
        first_time = True

        while remaining > 0:
            clear_screen(self.stdout)
            if first_time:
                print_slow(node.text, self.delay_us, self.stdout)
                first_time = False
            else:
                self._write("You have more to explore here. What do you want to check?\n\n")

            for letter, (slot, _) in open_slots.items():
                self._write(f"{letter}. {node.options[slot]}\n")

            while True:
                answer = self._read_choice()
                if answer in open_slots:
                    break
                self._write("Invalid choice. Try again.\n")

            _, target = open_slots.pop(answer)
            clear_screen(self.stdout)
            print_slow(get_node(target).text, self.delay_us, self.stdout)
            self._write("\n(Press Enter to continue...)")
            self._read_line()
            remaining -= 1

        clear_screen(self.stdout)
        self._write("You have finished exploring.\n(Press Enter to continue...)\n")
        self._read_line()
        self.run_node(next_node_id)