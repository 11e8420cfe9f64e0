"""Unit tests for MultiwordToken and the shared TokenAggregate behavior."""

import logging

import pytest

from conllukit.errors import MalformedGroupError, MalformedLineError
from conllukit.multiword import MultiwordToken, parse_range
from conftest import token_line

HAVENT_BLOCK = "\n".join(
    [
        token_line("2-3", "haven't"),
        token_line("2", "have", "have", "VERB", "VBP", "Number=Sing|Person=1|Tense=Pres", "0", "root"),
        token_line("3", "not", "not", "PART", "RB", "Negative=Neg", "2", "neg"),
    ]
)


@pytest.fixture
def havent():
    return MultiwordToken.parse(HAVENT_BLOCK)


class TestMultiwordParse:
    """Test cases for MultiwordToken.parse."""

    def test_parse_builds_children(self, havent):
        assert havent.form == "haven't"
        assert [token.id for token in havent.tokens] == [2, 3]
        assert [token.form for token in havent.tokens] == ["have", "not"]
        assert havent.tokens[0].lemma == "have"

    def test_span_matches_range_line(self, havent):
        assert havent.id == "2-3"
        assert havent.span == (2, 3)
        assert havent.first == 2
        assert havent.last == 3

    def test_child_count_mismatch(self):
        block = "\n".join([token_line("2-4", "xyz"), token_line("2", "x"), token_line("3", "y")])
        with pytest.raises(MalformedGroupError) as excinfo:
            MultiwordToken.parse(block)
        assert excinfo.value.span == (2, 4)

    def test_children_out_of_order(self):
        block = "\n".join([token_line("2-3", "xy"), token_line("3", "y"), token_line("2", "x")])
        with pytest.raises(MalformedGroupError):
            MultiwordToken.parse(block)

    def test_child_outside_span(self):
        block = "\n".join([token_line("2-3", "xy"), token_line("2", "x"), token_line("4", "y")])
        with pytest.raises(MalformedGroupError):
            MultiwordToken.parse(block)

    def test_descending_range(self):
        block = "\n".join([token_line("3-2", "xy"), token_line("2", "x"), token_line("3", "y")])
        with pytest.raises(MalformedGroupError):
            MultiwordToken.parse(block)

    def test_short_range_line(self):
        with pytest.raises(MalformedLineError):
            MultiwordToken.parse("2-3\thaven't\n" + token_line("2", "have") + "\n" + token_line("3", "not"))

    def test_not_a_range(self):
        with pytest.raises(MalformedLineError):
            MultiwordToken.parse(token_line("2", "have"))

    def test_range_annotations_are_dropped(self, caplog):
        block = "\n".join(
            [token_line("1-2", "del", "_", "_", "_", "_", "_", "_", "_", "SpaceAfter=No"), token_line("1", "de"), token_line("2", "el")]
        )
        with caplog.at_level(logging.WARNING, logger="conllukit.multiword"):
            group = MultiwordToken.parse(block)

        assert "misc" in caplog.text
        assert group.serialize().splitlines()[0] == token_line("1-2", "del")


class TestMultiwordSerialize:
    """Test cases for MultiwordToken.serialize."""

    def test_round_trip(self, havent):
        assert havent.serialize() == HAVENT_BLOCK

    def test_range_follows_children_after_shift(self, havent):
        havent.shift(2)

        assert havent.id == "4-5"
        assert havent.serialize().splitlines()[0] == token_line("4-5", "haven't")
        assert [token.id for token in havent.tokens] == [4, 5]

    def test_empty_group(self):
        group = MultiwordToken(form="x")
        assert group.id is None
        assert group.span is None
        assert not group.matches("1-2")


def test_parse_range():
    assert parse_range("2-3") == (2, 3)
    assert parse_range("12-14") == (12, 14)
    assert parse_range("2") is None
    assert parse_range("2-x") is None


def test_matches_range_or_first_child(havent):
    assert havent.matches("2-3")
    assert havent.matches(2)
    assert havent.matches("2")
    assert not havent.matches(3)


def test_aggregate_access(havent):
    assert len(havent) == 2
    assert havent[1].form == "not"
    assert [token.form for token in havent] == ["have", "not"]
    assert [token.id for token in havent.words()] == [2, 3]
    assert havent.ids() == [2, 3]
    assert havent.find(3) == 1
    assert havent.get(2).form == "have"
    assert havent.get(9) is None


def test_dict_round_trip(havent):
    data = havent.to_dict()

    assert data["id"] == "2-3"
    assert data["form"] == "haven't"
    assert len(data["tokens"]) == 2
    assert MultiwordToken.from_dict(data) == havent
