"""Shared pytest fixtures and test helpers for conllukit tests."""

import pytest


def token_line(*fields):
    """Join fields with tabs, padding missing trailing fields with ``_``."""
    padded = list(fields) + ["_"] * (10 - len(fields))
    return "\t".join(padded)


SAMPLE_LINES = [
    "# sent_id = 2",
    "# text = I haven't a clue.",
    token_line("1", "I", "I", "PRON", "PRP", "Case=Nom|Number=Sing|Person=1", "2", "nsubj"),
    token_line("2-3", "haven't"),
    token_line("2", "have", "have", "VERB", "VBP", "Number=Sing|Person=1|Tense=Pres", "0", "root"),
    token_line("3", "not", "not", "PART", "RB", "Negative=Neg", "2", "neg"),
    token_line("4", "a", "a", "DET", "DT", "Definite=Ind|PronType=Art", "5", "det"),
    token_line("5", "clue", "clue", "NOUN", "NN", "Number=Sing", "2", "obj", "_", "SpaceAfter=No"),
    token_line("6", ".", ".", "PUNCT", ".", "_", "2", "punct"),
]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the conllukit config directory at a temporary location."""
    config_dir = tmp_path / "conllukit-config"
    monkeypatch.setenv("CONLLUKIT_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def sample_text():
    """A sentence with metadata and one multiword token."""
    return "\n".join(SAMPLE_LINES) + "\n"


@pytest.fixture
def two_token_text():
    return (
        "1\tI\tI\tPRON\tPRP\t_\t2\tnsubj\t_\t_\n"
        "2\tam\tbe\tAUX\tVBP\t_\t0\troot\t_\t_\n"
    )


@pytest.fixture
def edit_text():
    """ab(1) c(2) de(3-4) f(5): a standalone token before and after a group."""
    return "\n".join(
        [
            token_line("1", "ab", "ab", "NOUN"),
            token_line("2", "c", "c", "ADP"),
            token_line("3-4", "de"),
            token_line("3", "d", "d", "ADP"),
            token_line("4", "e", "e", "DET"),
            token_line("5", "f", "f", "PUNCT"),
        ]
    ) + "\n"


@pytest.fixture
def sample_file(tmp_path, sample_text):
    path = tmp_path / "sample.conllu"
    second = "# sent_id = 3\n# lang = en\n" + token_line("1", "Yes", "yes", "INTJ") + "\n"
    path.write_text(sample_text + "\n" + second + "\n", encoding="utf-8")
    return path
