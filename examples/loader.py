"""Dynamically created panels that load their content through effects.

Each panel asks the host to fetch a document. The host performs the effect
later; the message it produces still lands in the panel that asked.

Run: python examples/loader.py
"""

import logging
from dataclasses import dataclass, field

from partkit import (
    Effect,
    Indexed,
    Program,
    accessors,
    configure,
    embed_update,
    field_lens,
    indexed,
    make_index,
    pack,
)

DOCUMENTS = {"intro": "Hello there.", "usage": "Dispatch everything through one channel."}


@dataclass(frozen=True)
class Fetch:
    name: str


@dataclass(frozen=True)
class Loaded:
    text: str


@dataclass(frozen=True)
class Panel:
    title: str = "(empty)"
    body: str = ""
    loading: bool = False


def panel_update(msg, panel: Panel) -> tuple[Panel, tuple]:
    match msg:
        case Fetch(name=name):
            return Panel(title=name, loading=True), (Effect(("fetch", name), Loaded),)
        case Loaded(text=text):
            return Panel(title=panel.title, body=text), ()
    return panel, ()


@dataclass(frozen=True)
class App:
    panels: Indexed[Panel] = field(default_factory=Indexed)


panels_lens = field_lens("panels")
panels = accessors(panels_lens.get, panels_lens.set, Panel())


def panel_part(idx):
    lens = indexed(panels_lens.get, panels_lens.set, Panel(), idx)
    return embed_update(lens.get, lens.set, panel_update)


def perform(effect: Effect):
    """Host side: the only place that knows how to run a fetch."""
    kind, name = effect.description
    if kind != "fetch":
        raise ValueError(f"Unknown effect {kind!r}")
    return effect.resolve(DOCUMENTS.get(name, "not found"))


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    configure(trace_dispatch=True)

    program = Program(App())
    # Panels live under static slot 0, one dynamic instance per document
    for n, name in enumerate(["intro", "usage", "missing"]):
        program.dispatch(pack(panel_part(make_index(0, n)), Fetch(name)))

    print("pending effects:", len(program.pending))
    program.run_effects(perform)

    for n in range(3):
        panel = panels.get(make_index(0, n), program.model)
        print(f"{panel.title}: {panel.body}")

    model = panels.reset(make_index(0, 2), program.model)
    print("after reset:", panels.get(make_index(0, 2), model))


if __name__ == "__main__":
    main()
