"""
Sentence: metadata comments plus an ordered list of tokens and multiword tokens.

For example, a Sentence may represent the following block::

    # sent_id = 2
    # text = I haven't a clue.
    1	I	I	PRON	PRP	Case=Nom|Number=Sing|Person=1	2	nsubj	_	_
    2-3	haven't	_	_	_	_	_	_	_	_
    2	have	have	VERB	VBP	Number=Sing|Person=1|Tense=Pres	0	root	_	_
    3	not	not	PART	RB	Negative=Neg	2	neg	_	_
    4	a	a	DET	DT	Definite=Ind|PronType=Art	5	det	_	_
    5	clue	clue	NOUN	NN	Number=Sing	2	obj	_	SpaceAfter=No
    6	.	.	PUNCT	.	_	2	punct	_	_

Here a single MultiwordToken owns the lines ``2-3``, ``2`` and ``3``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Union

from .aggregate import TokenAggregate
from .errors import MalformedGroupError, MalformedLineError, NotFoundError
from .multiword import MultiwordToken, parse_range
from .token import FIELD_SEPARATOR, Token, TokenId

logger = logging.getLogger(__name__)

Entry = Union[Token, MultiwordToken]

_METADATA = re.compile(r"# (.*) = (.*)")


def _is_blank(line: str) -> bool:
    return not line.strip()


def _is_comment(line: str) -> bool:
    return line.startswith("#")


def _line_id(line: str) -> str:
    return line.split(FIELD_SEPARATOR, 1)[0]


def _parse_metadata(lines: List[str]) -> Dict[str, str]:
    metadata: Dict[str, str] = {}
    for line in lines:
        if not _is_comment(line):
            continue
        match = _METADATA.search(line)
        if match:
            metadata[match.group(1)] = match.group(2)
        else:
            logger.debug("Ignoring comment without 'key = value': %r", line)
    return metadata


def _plan_groups(lines: List[str], strict: bool) -> Dict[int, List[int]]:
    """
    Map the index of every range line to the indexes of its child lines.

    Strict mode takes the lines directly following the range line; lenient
    mode collects them anywhere in the block by id, in span order.
    """
    groups: Dict[int, List[int]] = {}
    claimed: Set[int] = set()
    for index, line in enumerate(lines):
        if _is_blank(line) or _is_comment(line):
            continue
        line_id = _line_id(line)
        if "-" not in line_id:
            continue
        span = parse_range(line_id)
        if span is None:
            if strict:
                raise MalformedLineError(
                    f"'{line_id}' is not a multiword range", line=line, line_number=index + 1
                )
            logger.warning("Skipping line %d with malformed range id %r", index + 1, line_id)
            continue
        first, last = span
        span_ids = [str(value) for value in range(first, last + 1)]
        if strict:
            children: List[int] = []
            cursor = index + 1
            while cursor < len(lines) and len(children) < len(span_ids):
                if _line_id(lines[cursor]) not in span_ids:
                    break
                children.append(cursor)
                cursor += 1
            if len(children) != len(span_ids):
                raise MalformedGroupError(
                    f"range {line_id} must be directly followed by its {len(span_ids)} tokens",
                    span=span,
                    line_number=index + 1,
                )
        else:
            children = []
            for value in span_ids:
                position = next(
                    (
                        position
                        for position, other in enumerate(lines)
                        if position != index
                        and position not in claimed
                        and not _is_comment(other)
                        and _line_id(other) == value
                    ),
                    None,
                )
                if position is not None:
                    children.append(position)
        groups[index] = children
        claimed.update(children)
    return groups


def _parse_entries(lines: List[str], strict: bool) -> List[Entry]:
    groups = _plan_groups(lines, strict)
    consumed = {child for children in groups.values() for child in children}
    # Ids owned by multiword groups, wherever their range line sits
    used_ids: Set[int] = set()
    for index in groups:
        first, last = parse_range(_line_id(lines[index]))
        used_ids.update(range(first, last + 1))
    entries: List[Entry] = []
    for index, line in enumerate(lines):
        if index in consumed or _is_blank(line) or _is_comment(line):
            continue
        line_number = index + 1
        if index in groups:
            block = "\n".join(lines[position] for position in [index] + groups[index])
            try:
                entries.append(MultiwordToken.parse(block))
            except MalformedGroupError as exc:
                raise MalformedGroupError(exc.message, span=exc.span, line_number=line_number) from exc
            except MalformedLineError as exc:
                raise MalformedLineError(exc.message, line=exc.line, line_number=line_number) from exc
            continue
        if "-" in _line_id(line) and not strict:
            # Malformed range already reported while planning groups
            continue
        try:
            token = Token.parse(line)
        except MalformedLineError as exc:
            if strict:
                raise MalformedLineError(exc.message, line=line, line_number=line_number) from exc
            logger.warning("Skipping malformed line %d: %r", line_number, line)
            continue
        if isinstance(token.id, int):
            if token.id in used_ids:
                if strict:
                    raise MalformedLineError(
                        f"token id {token.id} is already used", line=line, line_number=line_number
                    )
                logger.warning("Skipping line %d with duplicate token id %d", line_number, token.id)
                continue
            used_ids.add(token.id)
        entries.append(token)
    return entries


@dataclass
class Sentence(TokenAggregate):
    """
    Metadata maps ``# key = value`` comments in file order.

    ``tokens`` holds Tokens and MultiwordTokens in display order. Display
    order never depends on the ids; the ids are kept contiguous by
    :meth:`expand` and :meth:`collapse`.
    """

    metadata: Dict[str, str] = field(default_factory=dict)
    tokens: List[Entry] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str, *, strict: bool = True) -> "Sentence":
        """
        Parse one sentence block.

        Args:
            text: The sentence block (comments and token lines)
            strict: Require multiword children to follow their range line and
                reject unrecognized lines. When False, children are collected
                anywhere in the block by id and unrecognized lines are skipped
                with a warning.

        Returns:
            The parsed Sentence

        Raises:
            MalformedLineError: If a line cannot be parsed
            MalformedGroupError: If a range line does not match its children
        """
        lines = text.splitlines()
        return cls(metadata=_parse_metadata(lines), tokens=_parse_entries(lines, strict))

    def serialize(self) -> str:
        lines = [f"# {key} = {value}" for key, value in self.metadata.items()]
        lines.extend(entry.serialize() for entry in self.tokens)
        lines.append("")
        return "\n".join(lines)

    @property
    def sent_id(self) -> Optional[str]:
        return self.metadata.get("sent_id")

    @sent_id.setter
    def sent_id(self, value: Optional[str]) -> None:
        if value is None:
            self.metadata.pop("sent_id", None)
        else:
            self.metadata["sent_id"] = value

    @property
    def text(self) -> Optional[str]:
        return self.metadata.get("text")

    @text.setter
    def text(self, value: Optional[str]) -> None:
        if value is None:
            self.metadata.pop("text", None)
        else:
            self.metadata["text"] = value

    def expand(
        self, token_id: TokenId, index: int, *, missing_ok: bool = True
    ) -> Optional[MultiwordToken]:
        """
        Split a standalone token into a two-part multiword token.

        The first part keeps the original id, the second takes the next id and
        every later entry moves up by one. Only the form survives: all other
        annotation fields of the original token are dropped.

        Args:
            token_id: Id of a standalone (non-multiword) token
            index: Character offset in the form, ``0 < index < len(form)``
            missing_ok: Return None instead of raising when no such token exists

        Returns:
            The new MultiwordToken, or None if the token was not found

        Raises:
            NotFoundError: If the token is missing and ``missing_ok`` is False
            ValueError: If ``index`` does not split the form into two parts
        """
        position = next(
            (
                position
                for position, entry in enumerate(self.tokens)
                if not entry.is_multiword
                and isinstance(entry.id, int)
                and entry.matches(token_id)
            ),
            None,
        )
        if position is None:
            if not missing_ok:
                raise NotFoundError("Token", token_id)
            logger.debug("expand: no standalone token with id %s", token_id)
            return None

        original = self.tokens[position]
        form = original.form or ""
        if not 0 < index < len(form):
            raise ValueError(f"Cannot split '{form}' at offset {index}")

        initial = Token(id=original.id, form=form[:index])
        second = Token(id=original.id + 1, form=form[index:])
        group = MultiwordToken(form=form, tokens=[initial, second])
        self.tokens[position] = group
        self._shift_ids(position + 1, 1)
        logger.debug("Expanded token %s into %s", original.id, group.id)
        return group

    def collapse(self, token_id: TokenId, *, missing_ok: bool = True) -> Optional[Token]:
        """
        Merge a multiword token back into a single token.

        ``token_id`` is either the range id (``"2-3"``) or the id of the first
        child (``2``). The new token takes the first child's id and the
        group's form; the children's annotations are dropped. Every later
        entry moves down by the number of removed ids.

        Returns:
            The new Token, or None if no multiword token matched

        Raises:
            NotFoundError: If nothing matched and ``missing_ok`` is False
        """
        position = next(
            (
                position
                for position, entry in enumerate(self.tokens)
                if entry.is_multiword and entry.matches(token_id)
            ),
            None,
        )
        if position is None:
            if not missing_ok:
                raise NotFoundError("MultiwordToken", token_id)
            logger.debug("collapse: no multiword token with id %s", token_id)
            return None

        group = self.tokens[position]
        collapsed = Token(id=group.first, form=group.form)
        self.tokens[position] = collapsed
        self._shift_ids(position + 1, -(len(group.tokens) - 1))
        logger.debug("Collapsed %s into token %s", group.id, collapsed.id)
        return collapsed

    def _shift_ids(self, start: int, delta: int) -> None:
        for position in range(start, len(self.tokens)):
            self.tokens[position].shift(delta)

    def check_ids(self) -> bool:
        """True when the integer ids are exactly 1..n with no gaps or duplicates."""
        ids = self.ids()
        return sorted(ids) == list(range(1, len(ids) + 1))

    @classmethod
    def from_dict(cls, data: dict) -> "Sentence":
        entries: List[Entry] = []
        for entry in data.get("tokens", []):
            if "tokens" in entry:
                entries.append(MultiwordToken.from_dict(entry))
            else:
                entries.append(Token.from_dict(entry))
        return cls(metadata=dict(data.get("metadata", {})), tokens=entries)

    def to_dict(self) -> dict:
        return {
            "metadata": dict(self.metadata),
            "tokens": [entry.to_dict() for entry in self.tokens],
        }
