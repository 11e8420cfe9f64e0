"""
Multiword tokens (contractions) such as::

    2-3	haven't	_	_	_	_	_	_	_	_
    2	have	have	VERB	VBP	Number=Sing|Person=1|Tense=Pres	0	root	_	_
    3	not	not	PART	RB	Negative=Neg	2	neg	_	_
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Tuple

from .aggregate import TokenAggregate
from .errors import MalformedGroupError, MalformedLineError
from .token import (
    ANNOTATION_FIELDS,
    FIELD_COUNT,
    FIELD_SEPARATOR,
    PLACEHOLDER,
    Token,
    TokenId,
    is_unset,
    normalize_id,
)

logger = logging.getLogger(__name__)

_RANGE_ID = re.compile(r"^(\d+)-(\d+)$")


def parse_range(value: str) -> Optional[Tuple[int, int]]:
    """Return ``(first, last)`` for a range id like ``2-3``, else None."""
    match = _RANGE_ID.match(value)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


@dataclass
class MultiwordToken(TokenAggregate):
    form: str = ""
    tokens: List[Token] = field(default_factory=list)

    is_multiword: ClassVar[bool] = True

    @property
    def first(self) -> Optional[TokenId]:
        return self.tokens[0].id if self.tokens else None

    @property
    def last(self) -> Optional[TokenId]:
        return self.tokens[-1].id if self.tokens else None

    @property
    def span(self) -> Optional[Tuple[TokenId, TokenId]]:
        if not self.tokens:
            return None
        return self.first, self.last

    @property
    def id(self) -> Optional[str]:
        # Derived from the children, never stored
        if not self.tokens:
            return None
        return f"{self.first}-{self.last}"

    @classmethod
    def parse(cls, block: str) -> "MultiwordToken":
        """
        Build a MultiwordToken from a range line followed by its child lines.

        Args:
            block: Newline-separated text; the first line is the range line

        Returns:
            The parsed group

        Raises:
            MalformedLineError: If the range line is not a 10-field range line
            MalformedGroupError: If the children do not match the declared span
        """
        lines = [line for line in block.splitlines() if line.strip()]
        if not lines:
            raise MalformedLineError("empty multiword token block")
        range_line, child_lines = lines[0], lines[1:]

        fields = range_line.split(FIELD_SEPARATOR)
        if len(fields) != FIELD_COUNT:
            raise MalformedLineError(
                f"expected {FIELD_COUNT} tab-separated fields, found {len(fields)}",
                line=range_line,
            )
        span = parse_range(fields[0])
        if span is None:
            raise MalformedLineError(f"'{fields[0]}' is not a multiword range", line=range_line)
        first, last = span
        if first < 1 or first >= last:
            raise MalformedGroupError(f"range {fields[0]} must be ascending and start at 1 or later", span=span)

        dropped = [
            name
            for name, value in zip(ANNOTATION_FIELDS, fields[2:])
            if not is_unset(value) and value != PLACEHOLDER
        ]
        if dropped:
            logger.warning("Dropping %s on multiword range %s", ", ".join(dropped), fields[0])

        expected = last - first + 1
        if len(child_lines) != expected:
            raise MalformedGroupError(
                f"range {fields[0]} declares {expected} tokens, found {len(child_lines)}",
                span=span,
            )
        tokens: List[Token] = []
        for expected_id, line in zip(range(first, last + 1), child_lines):
            token = Token.parse(line)
            if token.id != expected_id:
                raise MalformedGroupError(
                    f"token {token.id} is outside range {fields[0]} or out of order",
                    span=span,
                )
            tokens.append(token)
        return cls(form=fields[1], tokens=tokens)

    def serialize(self) -> str:
        range_line = FIELD_SEPARATOR.join(
            [f"{self.first}-{self.last}", PLACEHOLDER if is_unset(self.form) else self.form]
            + [PLACEHOLDER] * len(ANNOTATION_FIELDS)
        )
        return "\n".join([range_line] + [token.serialize() for token in self.tokens])

    def shift(self, delta: int) -> None:
        for token in self.tokens:
            token.shift(delta)

    def matches(self, token_id: TokenId) -> bool:
        if not self.tokens:
            return False
        normalized = normalize_id(token_id)
        return normalized == self.id or normalized == self.first

    @classmethod
    def from_dict(cls, data: dict) -> "MultiwordToken":
        return cls(
            form=data.get("form", ""),
            tokens=[Token.from_dict(t) for t in data.get("tokens", [])],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "form": self.form,
            "tokens": [token.to_dict() for token in self.tokens],
        }
