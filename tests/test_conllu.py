"""Tests for document-level CoNLL-U reading and writing."""

import json

import pytest

from conllukit.conllu import (
    conllu_to_sentences,
    iter_sentence_blocks,
    read_conllu,
    sentences_to_conllu,
    sentences_to_json_payload,
    write_conllu,
)
from conllukit.errors import ConlluError, MalformedLineError
from conftest import token_line


def test_blocks_split_on_blank_lines():
    text = token_line("1", "a") + "\n\n\n" + token_line("1", "b") + "\n   \n" + token_line("1", "c")
    blocks = list(iter_sentence_blocks(text))

    assert blocks == [token_line("1", "a") + "\n", token_line("1", "b") + "\n", token_line("1", "c") + "\n"]


def test_blocks_normalize_crlf():
    text = "# sent_id = 1\r\n" + token_line("1", "a") + "\r\n\r\n"
    assert list(iter_sentence_blocks(text)) == ["# sent_id = 1\n" + token_line("1", "a") + "\n"]


def test_empty_document():
    assert list(iter_sentence_blocks("\n\n")) == []
    assert conllu_to_sentences("") == []
    assert sentences_to_conllu([]) == ""


def test_document_round_trip(sample_file):
    text = sample_file.read_text(encoding="utf-8")
    sentences = conllu_to_sentences(text)

    assert [sentence.sent_id for sentence in sentences] == ["2", "3"]
    assert sentences_to_conllu(sentences) == text


def test_error_reports_sentence_number(sample_text):
    text = sample_text + "\n" + token_line("1", "ok") + "\n2\tbroken\n"
    with pytest.raises(MalformedLineError) as excinfo:
        conllu_to_sentences(text)

    assert excinfo.value.sentence_number == 2
    assert excinfo.value.line_number == 2
    assert str(excinfo.value).startswith("sentence 2: line 2:")


def test_errors_are_value_errors(sample_text):
    with pytest.raises(ValueError):
        conllu_to_sentences(token_line("1-2", "del"))
    assert issubclass(ConlluError, ValueError)


def test_lenient_document():
    text = token_line("1", "a") + "\n2\tbroken\n\n" + token_line("1", "b") + "\n"
    sentences = conllu_to_sentences(text, strict=False)

    assert [len(sentence.tokens) for sentence in sentences] == [1, 1]


def test_read_and_write(sample_file, tmp_path):
    sentences = read_conllu(sample_file)
    target = tmp_path / "out.conllu"
    write_conllu(sentences, target)

    assert target.read_text(encoding="utf-8") == sample_file.read_text(encoding="utf-8")


def test_json_payload(sample_file):
    payload = sentences_to_json_payload(read_conllu(sample_file))

    assert len(payload["sentences"]) == 2
    first = payload["sentences"][0]
    assert first["metadata"] == {"sent_id": "2", "text": "I haven't a clue."}
    assert first["tokens"][1]["id"] == "2-3"
    assert [token["form"] for token in first["tokens"][1]["tokens"]] == ["have", "not"]
    json.dumps(payload)
