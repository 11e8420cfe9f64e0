"""Whole CoNLL-U documents: sentence blocks separated by blank lines."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from .errors import ConlluError
from .sentence import Sentence

logger = logging.getLogger(__name__)


def iter_sentence_blocks(conllu_text: str) -> Iterator[str]:
    """
    Split a CoNLL-U document into sentence blocks.

    Blocks are separated by one or more blank lines; line order inside a block
    is preserved and line terminators are normalized to ``\\n``.
    """
    block: List[str] = []
    for line in conllu_text.splitlines():
        if line.strip():
            block.append(line)
            continue
        if block:
            yield "\n".join(block) + "\n"
            block = []
    if block:
        yield "\n".join(block) + "\n"


def conllu_to_sentences(conllu_text: str, *, strict: bool = True) -> List[Sentence]:
    """
    Parse every sentence block of a CoNLL-U document.

    Args:
        conllu_text: CoNLL-U formatted text
        strict: Passed on to :meth:`Sentence.parse`

    Raises:
        ConlluError: With ``sentence_number`` set to the 1-based block number
    """
    sentences: List[Sentence] = []
    for number, block in enumerate(iter_sentence_blocks(conllu_text), start=1):
        try:
            sentences.append(Sentence.parse(block, strict=strict))
        except ConlluError as exc:
            exc.sentence_number = number
            raise
    logger.debug("Parsed %d sentence(s)", len(sentences))
    return sentences


def sentences_to_conllu(sentences: Iterable[Sentence]) -> str:
    # Each serialized sentence ends with a newline; the extra one is the blank separator
    return "".join(sentence.serialize() + "\n" for sentence in sentences)


def sentences_to_json_payload(sentences: Iterable[Sentence]) -> dict:
    return {"sentences": [sentence.to_dict() for sentence in sentences]}


def read_conllu(path: Union[str, Path], *, strict: bool = True) -> List[Sentence]:
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    logger.info("Reading %s", path)
    return conllu_to_sentences(text, strict=strict)


def write_conllu(sentences: Iterable[Sentence], path: Union[str, Path]) -> None:
    path = Path(path)
    path.write_text(sentences_to_conllu(sentences), encoding="utf-8")
    logger.info("Wrote %s", path)
