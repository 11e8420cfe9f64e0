"""Reading and writing sentences for the CLI's --input/--output options."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .conllu import conllu_to_sentences, sentences_to_conllu, sentences_to_json_payload
from .sentence import Sentence


def _render_json(sentences: List[Sentence]) -> str:
    return json.dumps(sentences_to_json_payload(sentences), indent=2, ensure_ascii=False) + "\n"


# Output format name -> renderer producing the full output text
OUTPUT_RENDERERS: Dict[str, Callable[[List[Sentence]], str]] = {
    "conllu": sentences_to_conllu,
    "json": _render_json,
}
_FORMAT_ALIASES = {"conll-u": "conllu"}


def resolve_output_format(name: Optional[str]) -> Optional[str]:
    """Return the canonical output format for ``name`` (case-insensitive), or None."""
    if not name:
        return None
    normalized = name.lower()
    normalized = _FORMAT_ALIASES.get(normalized, normalized)
    return normalized if normalized in OUTPUT_RENDERERS else None


def load_sentences(
    input_path: Optional[str], *, stdin_content: Optional[str] = None, strict: bool = True
) -> List[Sentence]:
    """
    Parse CoNLL-U from ``stdin_content`` when given, else from ``input_path``.

    Raises:
        SystemExit: If neither is available
        ConlluError: If the input is malformed
    """
    if stdin_content is not None:
        return conllu_to_sentences(stdin_content, strict=strict)
    if not input_path:
        raise SystemExit("CoNLL-U input requires --input or data on STDIN.")
    text = Path(input_path).read_text(encoding="utf-8")
    return conllu_to_sentences(text, strict=strict)


def save_sentences(
    sentences: List[Sentence], output_format: str, output_path: Optional[str] = None
) -> None:
    """Write ``sentences`` in ``output_format`` to ``output_path``, or to STDOUT."""
    resolved = resolve_output_format(output_format)
    if resolved is None:
        raise ValueError(
            f"Unknown output format '{output_format}'. Supported: {', '.join(sorted(OUTPUT_RENDERERS))}"
        )
    text = OUTPUT_RENDERERS[resolved](sentences)
    if output_path:
        Path(output_path).write_text(text, encoding="utf-8")
    else:
        print(text, end="")
