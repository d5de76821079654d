"""Two counters and a toggle embedded in one application model.

The application never matches on counter or toggle messages: every
interaction arrives as a boxed `Msg[App]` and goes through one dispatch call.

Run: python examples/counters.py
"""

from dataclasses import dataclass, field
from enum import Enum

from partkit import Indexed, Program, create, create1, field_lens


class Counter(Enum):
    INCREMENT = "+"
    DECREMENT = "-"


def counter_update(msg: Counter, count: int) -> tuple[int, tuple]:
    return (count + 1 if msg is Counter.INCREMENT else count - 1), ()


def counter_view(lift, count: int) -> dict:
    return {
        "text": f"[-] {count} [+]",
        "+": lift(Counter.INCREMENT),
        "-": lift(Counter.DECREMENT),
    }


def toggle_update(msg: str, on: bool) -> tuple[bool, tuple]:
    return (not on if msg == "flip" else on), ()


def toggle_view(lift, on: bool) -> dict:
    return {"text": "[x]" if on else "[ ]", "click": lift("flip")}


@dataclass(frozen=True)
class App:
    counters: Indexed[int] = field(default_factory=Indexed)
    dark_mode: bool = False


counters = field_lens("counters")
dark_mode = field_lens("dark_mode")

left = create(counter_view, counter_update, counters.get, counters.set, 0, lambda m: m, 0)
right = create(counter_view, counter_update, counters.get, counters.set, 0, lambda m: m, 1)
toggle = create1(toggle_view, toggle_update, dark_mode.get, dark_mode.set, lambda m: m)


def render(app: App) -> str:
    return f"left {left(app)['text']}  right {right(app)['text']}  dark {toggle(app)['text']}"


def main() -> None:
    program = Program(App())
    print(render(program.model))

    # Simulated user clicks, taken from whatever is currently rendered
    clicks = [
        lambda app: left(app)["+"],
        lambda app: left(app)["+"],
        lambda app: toggle(app)["click"],
        lambda app: right(app)["-"],
    ]
    for click in clicks:
        program.dispatch(click(program.model))
        print(render(program.model))


if __name__ == "__main__":
    main()
