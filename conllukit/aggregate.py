"""Ordered token collections shared by sentences and multiword tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, List, Optional

if TYPE_CHECKING:  # pragma: no cover - satisfied at type-check time
    from .token import Token, TokenId


class TokenAggregate:
    """
    Mixin for classes that own an ordered ``tokens`` list.

    Entries are either :class:`~conllukit.token.Token` or
    :class:`~conllukit.multiword.MultiwordToken`; they are told apart by
    their ``is_multiword`` flag. List order is the display order, ids are
    only used for addressing.
    """

    tokens: List[Any]

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.tokens)

    def __getitem__(self, position: int) -> Any:
        return self.tokens[position]

    def words(self) -> Iterator["Token"]:
        """Iterate over syntactic words, descending into multiword groups."""
        for entry in self.tokens:
            if entry.is_multiword:
                yield from entry.words()
            else:
                yield entry

    def ids(self) -> List[int]:
        return [word.id for word in self.words() if isinstance(word.id, int)]

    def find(self, token_id: "TokenId") -> Optional[int]:
        """
        Return the position of the top-level entry that covers ``token_id``.

        A multiword group covers its own range id (``"2-3"``) and the ids of
        all of its children.
        """
        for position, entry in enumerate(self.tokens):
            if entry.matches(token_id):
                return position
            if entry.is_multiword and entry.find(token_id) is not None:
                return position
        return None

    def get(self, token_id: "TokenId") -> Optional[Any]:
        position = self.find(token_id)
        if position is None:
            return None
        return self.tokens[position]
