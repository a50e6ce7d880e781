# ashfall

A short text adventure that you play in the terminal. You wake in a shallow
cave after a fire has burned the land around it. There is nothing left to eat
or drink, and you have to decide where to go next.

The story is printed one character at a time. At each step you pick an
option by typing its letter (`A`, `B`, `C` or `D`) and pressing Enter.
Lower-case letters are accepted too. Anything else prints
"Invalid choice. Try again." and asks again.

From the opening scene you can go south to the forest or north to the
farmland. Each of these is an exploration area: you check each thing once,
in any order, pressing Enter after each finding. When you have checked them
all, the game tells you that you have finished exploring.

## Installing

```
pip install .
```

## Playing

```
ashfall
```

The command takes no options besides `--help`. If input ends (for example
with Ctrl-D) the game stops quietly with exit status 0.

## What it does not do

The story stops after the forest and the farmland. Once an exploration area
is finished the game looks for the next scene (node 11 after the forest,
node 12 after the farm); the story graph has no such nodes, so the command
prints `ashfall: no story node with id 11` (or `12`) to standard error and
exits with status 1. There is no saving, loading or score.

## Using it from Python

The story graph and the engine can be used on their own, for scripted play
or for tests:

```python
import io

from ashfall.engine import Game
from ashfall.nodes import get_node

intro = get_node(0)
for slot, label, target in intro.choices():
    print(slot, label, "->", target)

out = io.StringIO()
game = Game(stdin=io.StringIO("a\n"), stdout=out, delay_us=0)
```

- `ashfall.nodes.get_node(node_id)` returns a `Node` and raises `KeyError`
  for an id that is not in the story.
- `Node` has `text`, `options` and `next`, each node holding four option
  slots; `Node.choices()` lists `(slot, label, next_id)` for the slots in use.
- `ashfall.engine.Game(stdin=None, stdout=None, delay_us=50000)` plays on the
  given streams, defaulting to the terminal. `delay_us` is the pause after
  each printed character, in microseconds.
- `Game.run_node(start_id)` plays the story from any node.
  `Game.run_exploration_node(base_node_id, option_count, next_node_id)` plays
  a single exploration area and then continues from `next_node_id`.
- When the input stream runs out, the engine raises `StoryEnded`.
- The helpers `clear_screen`, `to_upper`, `option_letter` and `print_slow`
  are in `ashfall.engine` too.

## Development

```
pip install -e ".[test]"
pytest
```