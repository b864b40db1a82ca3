"""
Enum wire codec.

Every enumerated field of the wire schema is exchanged as one exact string
token. ``EnumCodec`` holds the token table for one enumeration and converts in
both directions:

* ``deserialize`` is lenient: an unrecognized token yields ``default``
  (``None`` unless configured) and only emits a warning event.
* ``serialize`` is strict: anything outside the table, ``default`` included,
  raises ``InvalidEnumValueError`` before any output is produced.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import (
    Annotated,
    Any,
    Callable,
    Generic,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
)

from pydantic import BeforeValidator, PlainSerializer

from fabric_health.domain.entities.errors import InvalidEnumValueError
from fabric_health.shared.consts import UNKNOWN_TOKEN_EVENT
from fabric_health.shared.logging import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)

UnknownTokenHook = Callable[[str, Any], None]


class EnumCodec(Generic[E]):
    """Bidirectional mapping between enum members and wire tokens."""

    def __init__(
        self,
        name: str,
        table: Mapping[E, str],
        default: Optional[E] = None,
        on_unknown_token: Optional[UnknownTokenHook] = None,
    ):
        """
        Args:
            name: Wire name of the enumeration, used in error messages.
            table: Member to token mapping, in declaration order.
            default: Value returned for unrecognized tokens.
            on_unknown_token: Called with ``(name, token)`` on every fallback.
        """
        self.name = name
        self.default = default
        self.on_unknown_token = on_unknown_token
        self.log_unknown_tokens = True

        self._to_token: Mapping[E, str] = MappingProxyType(dict(table))
        self.enum_type: type = type(next(iter(self._to_token)))
        from_token = {}
        for member, token in self._to_token.items():
            if token in from_token:
                raise ValueError(
                    f"Duplicate wire token {token!r} in enum type {name}"
                )
            from_token[token] = member
        self._from_token: Mapping[str, E] = MappingProxyType(from_token)

    def __repr__(self) -> str:
        return f"EnumCodec({self.name!r}, tokens={list(self.tokens)!r})"

    @property
    def members(self) -> Tuple[E, ...]:
        return tuple(self._to_token)

    @property
    def tokens(self) -> Tuple[str, ...]:
        return tuple(self._to_token.values())

    def deserialize(self, raw_token: Any) -> Optional[E]:
        """Return the member for ``raw_token``, or ``default`` if none matches.

        Matching is exact and case-sensitive.
        """
        if isinstance(raw_token, str):
            member = self._from_token.get(raw_token)
            if member is not None:
                return member

        if self.log_unknown_tokens:
            logger.warning(
                UNKNOWN_TOKEN_EVENT,
                enum_type=self.name,
                token=raw_token,
                fallback=None if self.default is None else self.default.name,
            )
        if self.on_unknown_token is not None:
            self.on_unknown_token(self.name, raw_token)
        return self.default

    def serialize(self, member: Optional[E]) -> str:
        """Return the wire token for ``member``.

        Raises:
            InvalidEnumValueError: If ``member`` is not in the token table.
        """
        if not isinstance(member, self.enum_type) or member not in self._to_token:
            raise InvalidEnumValueError(self.name, member)
        return self._to_token[member]

    def read(self, tokens: Iterator[Any]) -> Optional[E]:
        """Consume one token from a reader cursor and deserialize it."""
        return self.deserialize(next(tokens))

    def write(self, out: List[str], member: Optional[E]) -> None:
        """Append the token for ``member`` to ``out``; nothing is appended on error."""
        out.append(self.serialize(member))

    def annotated(self) -> Any:
        """Build a pydantic field type that routes through this codec.

        Validation accepts wire tokens and members alike, and passes an unset
        value through without reporting it as unknown. Dumping always produces
        the wire token.
        """
        enum_type = self.enum_type

        def _validate(value: Any) -> Any:
            if value is None or isinstance(value, enum_type):
                return value
            return self.deserialize(value)

        return Annotated[
            Optional[enum_type],
            BeforeValidator(_validate),
            PlainSerializer(self.serialize, return_type=str, when_used="unless-none"),
        ]
