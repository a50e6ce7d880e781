"""The story graph: every scene, its choices and where each choice leads."""

from __future__ import annotations

from dataclasses import dataclass

MAX_OPTIONS = 4
END = -1


@dataclass(frozen=True)
class Node:
    """One scene of the story.

    ``options`` and ``next`` always hold ``MAX_OPTIONS`` entries; an option of
    ``None`` marks an unused slot.
    """

    text: str
    options: tuple[str | None, ...] = (None,) * MAX_OPTIONS
    next: tuple[int, ...] = (END,) * MAX_OPTIONS

    def __post_init__(self) -> None:
        options = tuple(self.options) + (None,) * (MAX_OPTIONS - len(self.options))
        targets = tuple(self.next) + (END,) * (MAX_OPTIONS - len(self.next))
        if len(options) != MAX_OPTIONS or len(targets) != MAX_OPTIONS:
            raise ValueError(f"a node holds at most {MAX_OPTIONS} options")
        object.__setattr__(self, "options", options)
        object.__setattr__(self, "next", targets)

    def choices(self) -> list[tuple[int, str, int]]:
        """Return ``(slot, label, next_id)`` for every option that is in use."""
        return [
            (slot, label, target)
            for slot, (label, target) in enumerate(zip(self.options, self.next))
            if label is not None
        ]


def _story(*paragraphs: str) -> str:
    """Join paragraphs with a blank line between them and a final newline."""
    return "\n\n".join(paragraphs) + "\n"


def _lines(*lines: str, end: str = "\n") -> str:
    """Join lines one per row, finishing with ``end``."""
    return "\n".join(lines) + end


_INTRO = _story(
    "The stench of scorched earth fills your lungs, "
    "dragging you from a half-formed dream.",
    "You curl tighter in the shallow cave that barely shields you from the wind.",
    "Pale light seeps in through the cracks like a weary traveler—"
    "hesitant, fading, unsure if it should continue.",
    "Outside, the forest is long gone. "
    "Ash drifts through the air like snow, settling over a land burned bare. ",
    "Charred tree trunks stand like the corpses of giants—"
    "upright, stubborn, unwilling to fall.",
    "A warm gust brushes your face, "
    "and with it comes a memory from the eve of it all.",
    "> “Today's update: "
    "Some bird and mammal species have begun migrating unusually early. "
    "Scientists suspect this could be an early warning sign of something larger.”",
    "You remember sitting in a cozy mountain cabin, drink in hand, "
    "laughing at how dramatic it all sounded.",
    "Looking back now… the scientists were being too careful.",
    "A sudden wave of hunger drags you back to the present. "
    "You dig through your pack—"
    "only to find a stale piece of bread and an empty water bottle.",
    "You chew the bread down despite the mold, fighting the nausea. "
    "Then you tilt the bottle and catch the last few drops of water.",
    "No more food. No more water.",
    "You can't stay here.",
    "You unfold your crumpled map. "
    "Your finger hovers over the faded ink. "
    "There are three paths ahead.",
    "Each one could lead to hope… or to death.",
)

_FOREST = _story(
    "You climb over a ridge of scorched stone—and finally hear something. "
    "A few birds calling in the distance.",
    "This was once a forest. Now it feels like a graveyard.",
    "Charred trunks stand upright like broken pillars, "
    "stripped of branches and leaves.",
    "Beneath your feet, a thick layer of ash spreads like pale snow.",
    "But not all life is gone.",
    "Near a cracked boulder, patches of moss creep quietly up the rock—"
    "faint green against black stone, like hope that refuses to leave.",
    "The air is strange. The sunlight burns, "
    "but the shadows are cold enough to raise goosebumps. ",
    "You kneel to touch the soil. The surface crumbles like sand, "
    "but underneath, there's a slick, waxy layer "
    "that pushes back against your fingers.",
    "You move forward—and find a small, blackened carcass. "
    "Maybe a rabbit. No flies. No smell. Just stillness.",
    "In a low-lying hollow, water has pooled. A shallow puddle, unmoving. "
    "The surface is oily, untouched by wind or ripple.",
    _lines("You start to wonder:", "Can anything still survive here?", end=""),
    "What do you want to check?",
)

_FARM = _story(
    "You walk for hours along a cracked stretch of asphalt, "
    "crossing scorched ground beneath a dimming sky.",
    "Just before sunset, a shape appears on the horizon—"
    "a collapsed fence, a leaning house, and a field drained of color.",
    "The crops still stand, scattered and brittle, pale as bone—"
    "like something half-buried and forgotten. "
    "Something about them feels... wrong.",
    "Not far off, a rusted well leans slightly to one side. "
    "The wind whistles through its open mouth, "
    "carrying a sharp mix of iron and decay.",
    "The ground crunches beneath your feet—dry, powdery, and pale.",
    "When you kneel to examine the soil, "
    "your fingers brush against a faint, crusty sheen—"
    "like salt or ash fused to the earth.",
    "The nearby house is half-collapsed, "
    "its door swinging on loose hinges in the wind.",
    "This place is broken—but perhaps... not beyond saving.",
    "Maybe there's still something here worth recovering.",
    "Where do you want to check?",
)

_MOSS = _lines(
    "You gently brush away the ash from the rock "
    "and uncover a few patches of moss still clinging to the surface.",
    "They seem like nature’s final resistance—"
    "holding moisture, preserving a trace of life.",
    "You recall reading that mosses are 'pioneer species'—"
    "they improve microclimates and stabilize soil, "
    "paving the way for recovery.",
)

_FOREST_SOIL = _lines(
    "You crouch down and scrape away the dry top layer.",
    "Beneath it lies a waxy, water-repellent texture.",
    "This might be 'hydrophobic soil'—a common post-fire phenomenon "
    "caused by damaged soil structure and depleted microbes.",
    "It blocks water and hinders new growth.",
    end="",
)

_LIFE = _lines(
    "In a crack between rocks, you find a small animal corpse—maybe a rabbit.",
    "There are no insects. No smell. Just silence.",
    "You realize it’s not just death—it’s the absence of decomposers.",
    "Without them, life cannot be reborn from what has ended.",
)

_WATER = _lines(
    "A shallow puddle rests in a low-lying depression.",
    "The surface gleams with a rainbow sheen—"
    "still, thick, and strangely silent.",
    "Perhaps it’s chemical runoff or heavy metal residue.",
    "Without vegetation or flow, the water here is undrinkable.",
    "You’ll need to search elsewhere.",
)

_CROPS = _lines(
    "The crops still stand—but they’re dry, brittle, bone-pale.",
    "You crack open an ear of corn and recoil at the sharp, bitter odor.",
    "The soil here may be tainted by pesticide, chemical fertilizer, "
    "or salt buildup from drought.",
    "These crops aren’t safe to eat.",
)

_WELL = _lines(
    "You approach the rusted well.",
    "A sharp blend of iron and decay drifts up from its mouth.",
    "You lower a bucket and raise a half-full pail of murky, yellowish water.",
    "A faint oil film glimmers on top.",
    "The well might be contaminated by chemicals or metals.",
    "You’ll need purification—or a new source.",
)

_FARM_SOIL = _lines(
    "You kneel and study the soil.",
    "A white, crystalline powder covers the cracked surface—"
    "likely salt or chemical deposits.",
    "Digging deeper, the earth is dry and compacted.",
    "This is classic salinized or polluted soil.",
    "Restoring it will take a long, patient process.",
)

_HOUSE = _lines(
    "You push open the creaking door. Silence.",
    "Inside, you find a few preserved cans and a couple of seed packets.",
    "On the table lies a faded hand-drawn map.",
    "One path is circled in red with the note: 'South – river?'",
    "Whoever lived here knew something—or hoped for it.",
)


NODES: tuple[Node, ...] = (
    Node(
        _INTRO,
        (
            "Head south to the forest's surviving edge",
            "Go north to the abandoned farmland",
        ),
        (1, 2),
    ),
    Node(
        _FOREST,
        (
            "Examine the moss",
            "Check the soil",
            "Inspect signs of life",
            "Investigate the water",
        ),
        (3, 4, 5, 6),
    ),
    Node(
        _FARM,
        ("Check the crops", "Inspect the well", "Examine the soil", "Enter the house"),
        (7, 8, 9, 10),
    ),
    Node(_MOSS),
    Node(_FOREST_SOIL),
    Node(_LIFE),
    Node(_WATER),
    Node(_CROPS),
    Node(_WELL),
    Node(_FARM_SOIL),
    Node(_HOUSE),
)


def get_node(node_id: int) -> Node:
    """Return the node with the given id, or raise KeyError if there is none."""
    if not 0 <= node_id < len(NODES):
        raise KeyError(f"no story node with id {node_id}")
    return NODES[node_id]