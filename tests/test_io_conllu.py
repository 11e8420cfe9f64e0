"""Tests for the CLI input/output helpers."""

import json

import pytest

from conllukit.io_conllu import load_sentences, resolve_output_format, save_sentences


@pytest.mark.parametrize(
    "name, expected",
    [("conllu", "conllu"), ("CoNLL-U", "conllu"), ("JSON", "json"), ("xml", None), ("", None), (None, None)],
)
def test_resolve_output_format(name, expected):
    assert resolve_output_format(name) == expected


def test_load_prefers_stdin_content(sample_file, two_token_text):
    sentences = load_sentences(str(sample_file), stdin_content=two_token_text)

    assert len(sentences) == 1
    assert [entry.form for entry in sentences[0].tokens] == ["I", "am"]


def test_load_without_input():
    with pytest.raises(SystemExit):
        load_sentences(None)


def test_save_to_stdout_and_file(sample_file, tmp_path, capsys):
    sentences = load_sentences(str(sample_file))

    save_sentences(sentences, "conll-u")
    assert capsys.readouterr().out == sample_file.read_text(encoding="utf-8")

    target = tmp_path / "out.json"
    save_sentences(sentences, "json", str(target))
    assert len(json.loads(target.read_text(encoding="utf-8"))["sentences"]) == 2


def test_save_unknown_format(sample_file):
    with pytest.raises(ValueError):
        save_sentences(load_sentences(str(sample_file)), "xml")
