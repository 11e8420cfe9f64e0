"""
A single CoNLL-U token line.

A Token represents one line of the token table, for example::

    1	I	I	PRON	PRP	Case=Nom|Number=Sing|Person=1	2	nsubj	_	_

The id is normally managed by the owning :class:`~conllukit.sentence.Sentence`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from .errors import MalformedLineError

FIELD_SEPARATOR = "\t"
PLACEHOLDER = "_"
ANNOTATION_FIELDS = (
    "lemma",
    "upostag",
    "xpostag",
    "feats",
    "head",
    "deprel",
    "deps",
    "misc",
)
FIELD_COUNT = 2 + len(ANNOTATION_FIELDS)

TokenId = Union[int, str]

# Empty nodes (enhanced dependencies) use decimal ids such as 8.1
_EMPTY_NODE_ID = re.compile(r"^(\d+)\.(\d+)$")


def is_unset(value: Optional[object]) -> bool:
    return value is None or value == ""


def parse_id(value: str) -> Optional[TokenId]:
    """Return ``value`` as an int when it is a clean positive integer, else the raw string."""
    if is_unset(value) or value == PLACEHOLDER:
        return None
    if value.isascii() and value.isdigit():
        number = int(value)
        if number > 0:
            return number
    return value


def normalize_id(value: TokenId) -> Optional[TokenId]:
    """Coerce a lookup id so that ``"3"`` and ``3`` address the same token."""
    if isinstance(value, str):
        return parse_id(value.strip())
    return value


def shift_id(value: Optional[TokenId], delta: int) -> Optional[TokenId]:
    """Move an id by ``delta`` positions; non-numeric ids are returned untouched."""
    if isinstance(value, int):
        return value + delta
    if isinstance(value, str):
        match = _EMPTY_NODE_ID.match(value)
        if match:
            return f"{int(match.group(1)) + delta}.{match.group(2)}"
    return value


def _field_value(value: str) -> Optional[str]:
    if is_unset(value) or value == PLACEHOLDER:
        return None
    return value


def _render(value: Optional[object]) -> str:
    if is_unset(value):
        return PLACEHOLDER
    return str(value)


@dataclass
class Token:
    id: Optional[TokenId] = None
    form: Optional[str] = ""
    lemma: Optional[str] = None
    upostag: Optional[str] = None
    xpostag: Optional[str] = None
    feats: Optional[str] = None
    head: Optional[str] = None
    deprel: Optional[str] = None
    deps: Optional[str] = None
    misc: Optional[str] = None

    is_multiword: ClassVar[bool] = False

    @classmethod
    def parse(cls, line: str) -> "Token":
        """
        Build a Token from one tab-separated line.

        Args:
            line: A token line with exactly ten fields

        Returns:
            The parsed Token; ``_`` and empty annotation fields become ``None``

        Raises:
            MalformedLineError: If the line does not have ten fields
        """
        fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
        if len(fields) != FIELD_COUNT:
            raise MalformedLineError(
                f"expected {FIELD_COUNT} tab-separated fields, found {len(fields)}",
                line=line,
            )
        annotations = {
            name: _field_value(value)
            for name, value in zip(ANNOTATION_FIELDS, fields[2:])
        }
        return cls(id=parse_id(fields[0]), form=fields[1], **annotations)

    def serialize(self) -> str:
        # An unset id blanks the whole slot, form included
        if is_unset(self.id):
            id_output = PLACEHOLDER
            form_output = PLACEHOLDER
        else:
            id_output = str(self.id)
            form_output = "" if self.form is None else str(self.form)
        outputs = [id_output, form_output]
        outputs.extend(_render(getattr(self, name)) for name in ANNOTATION_FIELDS)
        return FIELD_SEPARATOR.join(outputs)

    def shift(self, delta: int) -> None:
        self.id = shift_id(self.id, delta)

    def matches(self, token_id: TokenId) -> bool:
        return not is_unset(self.id) and self.id == normalize_id(token_id)

    @classmethod
    def from_dict(cls, data: dict) -> "Token":
        return cls(
            id=data.get("id"),
            form=data.get("form", ""),
            **{name: data.get(name) for name in ANNOTATION_FIELDS},
        )

    def to_dict(self) -> dict:
        result = {
            "id": self.id,
            "form": self.form,
        }
        for name in ANNOTATION_FIELDS:
            value = getattr(self, name)
            if not is_unset(value):
                result[name] = value
        return result
