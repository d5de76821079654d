"""Tests for index paths, the Indexed mapping and index-scoped lenses."""

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from partkit import Indexed, check_laws, indexed, make_index, remove_entry
from sample_parts import App, fields_lens

index_paths = st.lists(st.integers(min_value=0, max_value=4), min_size=1, max_size=3).map(tuple)


@st.composite
def apps(draw):
    entries = draw(st.dictionaries(index_paths, st.text(max_size=5), max_size=4))
    return App(fields=Indexed(entries))


class TestMakeIndex:
    """Tests for make_index()."""

    def test_single_int(self):
        assert make_index(0) == (0,)

    def test_tuple_passthrough(self):
        path = (0, 1)
        assert make_index(path) is path

    def test_extends_parent_path(self):
        assert make_index((0,), 2) == (0, 2)
        assert make_index([1, 2], 3, (4,)) == (1, 2, 3, 4)

    def test_structural_equality_and_hash(self):
        assert make_index([0, 1]) == make_index(0, 1)
        assert hash(make_index([0, 1])) == hash((0, 1))

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            make_index(0, -1)

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="empty"):
            make_index(())

    @pytest.mark.parametrize("bad", ["0", 1.5, True, None, ("a",)])
    def test_non_int_rejected(self, bad):
        with pytest.raises(TypeError):
            make_index(bad)


class TestIndexed:
    """Tests for the Indexed mapping."""

    def test_lookup_absent_returns_default(self):
        assert Indexed[str]().lookup((0,), "") == ""

    def test_lookup_absent_without_default_returns_none(self):
        assert Indexed[str]().lookup(0) is None

    def test_set_returns_new_mapping(self):
        empty = Indexed[str]()

        filled = empty.set((0,), "a")

        assert filled[(0,)] == "a"
        assert (0,) not in empty
        assert len(empty) == 0

    def test_set_overwrites(self):
        entries = Indexed({(0,): "a"}).set((0,), "b")
        assert dict(entries) == {(0,): "b"}

    def test_int_key_shorthand(self):
        entries = Indexed[str]().set(3, "x")
        assert entries[(3,)] == "x"
        assert 3 in entries

    def test_remove(self):
        entries = Indexed({(0,): "a", (1,): "b"})

        remaining = entries.remove((0,))

        assert dict(remaining) == {(1,): "b"}
        assert (0,) in entries

    def test_remove_missing_is_noop(self):
        entries = Indexed({(0,): "a"})
        assert entries.remove((5,)) is entries

    def test_structural_equality(self):
        assert Indexed({(0,): "a"}) == Indexed([((0,), "a")])
        assert Indexed({(0,): "a"}) == {(0,): "a"}
        assert Indexed({(0,): "a"}) != Indexed({(0,): "b"})

    def test_contains_invalid_key_is_false(self):
        assert "nope" not in Indexed({(0,): "a"})

    def test_constructor_normalizes_keys(self):
        entries = Indexed({0: "a", (1, 2): "b"})
        assert set(entries) == {(0,), (1, 2)}


@given(app=apps(), idx=index_paths, value=st.text(max_size=5))
def test_indexed_lens_is_lawful(app, idx, value):
    lens = indexed(fields_lens.get, fields_lens.set, "", idx)
    assert check_laws(lens, app, value) == []


@given(app=apps(), first=index_paths, second=index_paths, value=st.text(max_size=5))
def test_index_isolation(app, first, second, value):
    """Writing one path never changes another path's entry or absence."""
    assume(first != second)
    lens_first = indexed(fields_lens.get, fields_lens.set, "", first)
    before = app.fields.lookup(second)
    had_second = second in app.fields

    updated = lens_first.set(value, app)

    assert updated.fields.lookup(second) == before
    assert (second in updated.fields) == had_second


@given(app=apps(), idx=index_paths, default=st.text(max_size=5))
def test_default_materialization_does_not_write(app, idx, default):
    """Reading an absent path yields the default and leaves the mapping alone."""
    assume(idx not in app.fields)
    lens = indexed(fields_lens.get, fields_lens.set, default, idx)

    assert lens.get(app) == default
    assert lens.get(app) == default
    assert idx not in app.fields
    assert app.fields.lookup(idx) is None


def test_writing_default_into_absent_entry_keeps_parent(app):
    lens = indexed(fields_lens.get, fields_lens.set, "", (0,))
    assert lens.set("", app) is app


def test_writing_default_over_present_entry_overwrites():
    parent = App(fields=Indexed({(0,): "hello"}))
    lens = indexed(fields_lens.get, fields_lens.set, "", (0,))

    updated = lens.set("", parent)

    assert updated.fields[(0,)] == ""


def test_remove_entry_reverts_to_default():
    parent = App(fields=Indexed({(0,): "hello", (1,): "keep"}))
    lens = indexed(fields_lens.get, fields_lens.set, "", (0,))

    updated = remove_entry(fields_lens.get, fields_lens.set, (0,), parent)

    assert lens.get(updated) == ""
    assert updated.fields[(1,)] == "keep"


def test_remove_entry_absent_returns_same_parent(app):
    assert remove_entry(fields_lens.get, fields_lens.set, (0,), app) is app
