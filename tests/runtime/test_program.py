"""Tests for the synchronous Program driver."""

import pytest

from partkit import (
    Effect,
    EffectLoopError,
    Indexed,
    PartsSettings,
    Program,
    embed_update,
    indexed,
    pack,
    perform_immediate,
)
from sample_parts import (
    App,
    Clear,
    Increment,
    Load,
    SetText,
    counter_lens,
    counter_update,
    fields_lens,
    text_update,
)

counter_part = embed_update(counter_lens.get, counter_lens.set, counter_update)


def text_part(idx):
    lens = indexed(fields_lens.get, fields_lens.set, "", idx)
    return embed_update(lens.get, lens.set, text_update)


def test_dispatch_replaces_model(app):
    program = Program(app)

    result = program.dispatch(pack(counter_part, Increment()))

    assert result == App(counter=1)
    assert program.model is result
    assert app.counter == 0


def test_dispatch_all_in_order(app):
    program = Program(app)

    program.dispatch_all(pack(counter_part, Increment()) for _ in range(3))

    assert program.model.counter == 3


def test_effects_queue_until_run():
    program = Program(App(fields=Indexed({(0,): "x"})))

    program.dispatch(pack(text_part((0,)), Clear()))

    assert len(program.pending) == 1
    assert program.model.fields[(0,)] == "x"

    performed = program.run_effects(perform_immediate)

    assert performed == 1
    assert program.pending == ()
    assert program.model.fields[(0,)] == ""


def test_host_effects_route_back_to_their_part():
    program = Program(App(fields=Indexed({(0,): "zero"})))
    program.dispatch(pack(text_part((3,)), Load("title")))

    def perform(effect):
        kind, key = effect.description
        assert kind == "load"
        return effect.resolve(f"loaded {key}")

    program.run_effects(perform)

    assert program.model.fields[(3,)] == "loaded title"
    assert program.model.fields[(0,)] == "zero"


def test_perform_returning_none_drops_message(app):
    program = Program(app)
    program.dispatch(pack(text_part((0,)), Load("x")))

    assert program.run_effects(lambda effect: None) == 1
    assert program.model == app


def test_effect_loop_limit(app):
    def forever(msg, count):
        return count + 1, (Effect.of(msg),)

    part = embed_update(counter_lens.get, counter_lens.set, forever)
    program = Program(app, settings=PartsSettings(max_effect_rounds=5))
    program.dispatch(pack(part, "again"))

    with pytest.raises(EffectLoopError, match="5 effects"):
        program.run_effects(perform_immediate)
    assert program.model.counter == 6


def test_perform_immediate_rejects_host_effects():
    with pytest.raises(TypeError, match="not an immediate effect"):
        perform_immediate(Effect(("load", "x"), SetText))
