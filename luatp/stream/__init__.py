"""Token stream."""

from luatp.stream.token_stream import TokenNode, TokenStream

__all__ = ["TokenNode", "TokenStream"]
