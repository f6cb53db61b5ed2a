"""Style token classification.

A style token is matched exactly (case-sensitive, no trimming) against the
direct-style vocabulary first and the generated-style vocabulary second.
"""

from __future__ import annotations

from avagate.protocol.errors import UnknownStyleError
from avagate.protocol.types import DEFAULT_STYLE, DirectStyle, GeneratedStyle, StyleDescriptor

_DIRECT = {style.value: style for style in DirectStyle}
_GENERATED = {variant.value: variant for variant in GeneratedStyle}


def classify(token: str | None = None) -> StyleDescriptor:
    """Map a raw style token to its :class:`DirectStyle` or :class:`GeneratedStyle`.

    An absent token (``None``) means ``"identicon"``.  An empty string is
    not absent and is rejected like any other unknown token.

    Raises:
        UnknownStyleError: If *token* is in neither vocabulary.
    """
    if token is None:
        token = DEFAULT_STYLE
    if token in _DIRECT:
        return _DIRECT[token]
    if token in _GENERATED:
        return _GENERATED[token]
    raise UnknownStyleError(token)
