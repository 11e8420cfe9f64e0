"""Exceptions raised while parsing or editing CoNLL-U sentences."""

from __future__ import annotations

from typing import Optional, Tuple, Union


class ConlluError(ValueError):
    """Base class for all conllukit parse and edit errors."""

    def __init__(self, message: str, *, sentence_number: Optional[int] = None):
        self.message = message
        self.sentence_number = sentence_number
        super().__init__(message)

    def __str__(self) -> str:
        if self.sentence_number is not None:
            return f"sentence {self.sentence_number}: {self.message}"
        return self.message


class MalformedLineError(ConlluError):
    """A token line has the wrong number of fields or an unrecognized shape."""

    def __init__(
        self,
        message: str,
        *,
        line: str = "",
        line_number: Optional[int] = None,
        sentence_number: Optional[int] = None,
    ):
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message, sentence_number=sentence_number)


class MalformedGroupError(ConlluError):
    """A range line's declared span does not match its child lines."""

    def __init__(
        self,
        message: str,
        *,
        span: Optional[Tuple[int, int]] = None,
        line_number: Optional[int] = None,
        sentence_number: Optional[int] = None,
    ):
        self.span = span
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message, sentence_number=sentence_number)


class NotFoundError(ConlluError):
    """The target of an expand or collapse does not exist."""

    def __init__(self, kind: str, token_id: Union[int, str]):
        self.kind = kind
        self.token_id = token_id
        super().__init__(f'{kind} with ID "{token_id!s}" does not exist')
