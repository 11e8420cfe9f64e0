"""Tabular summaries of parsed sentences for the ``info`` command."""

from __future__ import annotations

import argparse
from typing import List, Sequence

from tabulate import tabulate

from .language_utils import language_name, sentence_language
from .sentence import Sentence
from .token import ANNOTATION_FIELDS, PLACEHOLDER, is_unset

SUMMARY_HEADERS = ["#", "sent_id", "Language", "Entries", "Words", "MWT", "Ids"]
TOKEN_HEADERS = ["ID", "FORM"] + [name.upper() for name in ANNOTATION_FIELDS]


def summarize_sentences(sentences: Sequence[Sentence]) -> List[list]:
    rows: List[list] = []
    for number, sentence in enumerate(sentences, start=1):
        code = sentence_language(sentence)
        if code:
            language = language_name(code) or code
        else:
            language = ""
        rows.append(
            [
                number,
                sentence.sent_id or "",
                language,
                len(sentence.tokens),
                len(sentence.ids()),
                sum(1 for entry in sentence.tokens if entry.is_multiword),
                "ok" if sentence.check_ids() else "BROKEN",
            ]
        )
    return rows


def token_rows(sentence: Sentence) -> List[list]:
    rows: List[list] = []
    for entry in sentence.tokens:
        if entry.is_multiword:
            rows.append([entry.id, entry.form] + [PLACEHOLDER] * len(ANNOTATION_FIELDS))
            entries = entry.tokens
        else:
            entries = [entry]
        for token in entries:
            rows.append(
                [token.id, token.form]
                + [PLACEHOLDER if is_unset(getattr(token, name)) else getattr(token, name) for name in ANNOTATION_FIELDS]
            )
    return rows


def run_info_cli(args: argparse.Namespace, sentences: Sequence[Sentence]) -> int:
    """Print the summary table, and each sentence's token table with --tokens."""
    print(tabulate(summarize_sentences(sentences), headers=SUMMARY_HEADERS))
    if getattr(args, "tokens", False):
        for number, sentence in enumerate(sentences, start=1):
            print()
            print(f"Sentence {number}" + (f" ({sentence.sent_id})" if sentence.sent_id else ""))
            print(tabulate(token_rows(sentence), headers=TOKEN_HEADERS))
    return 0
