"""Mutable token sequence for one file."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from luatp.lexer.tokens import Token


class TokenNode:
    """One link in a TokenStream.

    A removed node keeps its `token` but loses its links, so it can never be
    walked into again.
    """

    __slots__ = ("token", "prev", "next", "_stream")

    def __init__(self, token: Token) -> None:
        self.token = token
        self.prev: TokenNode | None = None
        self.next: TokenNode | None = None
        self._stream: TokenStream | None = None

    @property
    def text(self) -> str:
        return self.token.value

    @property
    def is_linked(self) -> bool:
        return self._stream is not None

    def __repr__(self) -> str:
        return f"TokenNode({self.token.kind.name}, {self.token.value!r})"


class TokenStream:
    """Doubly linked list of tokens.

    Nodes at or after a walking cursor can be removed without invalidating the
    walk: `remove` hands back the successor to continue from.
    """

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._head: TokenNode | None = None
        self._tail: TokenNode | None = None
        self._len = 0
        for token in tokens:
            self.append(token)

    @property
    def head(self) -> TokenNode | None:
        return self._head

    @property
    def tail(self) -> TokenNode | None:
        return self._tail

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Token]:
        for node in self.nodes():
            yield node.token

    def nodes(self) -> Iterator[TokenNode]:
        """Walk nodes front to back, tolerating removal of the node just yielded or later ones."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            # A node removed while yielded has lost its links; resume from the saved successor.
            node = node.next if node.is_linked else following

    def append(self, token: Token) -> TokenNode:
        node = TokenNode(token)
        node._stream = self
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._len += 1
        return node

    def remove(self, node: TokenNode) -> TokenNode | None:
        """Unlink `node` and return the node that followed it."""
        if node._stream is not self:
            raise ValueError("Node does not belong to this token stream")
        following = node.next
        if node.prev is None:
            self._head = following
        else:
            node.prev.next = following
        if following is None:
            self._tail = node.prev
        else:
            following.prev = node.prev
        node.prev = None
        node.next = None
        node._stream = None
        self._len -= 1
        return following

    def clear(self) -> None:
        """Unlink every node so the tokens can be released."""
        node = self._head
        while node is not None:
            following = node.next
            node.prev = None
            node.next = None
            node._stream = None
            node = following
        self._head = None
        self._tail = None
        self._len = 0

    def text(self) -> str:
        return "".join(token.value for token in self)
