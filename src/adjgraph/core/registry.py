"""
Identity registry mapping vertex payloads to dense integer identifiers.

Algorithms work on small integers rather than on caller payloads. The registry
owns the bidirectional mapping and the identifier counter; identifiers are
assigned monotonically on first reference and are never handed out again, even
after the payload is released.
"""

import logging
from typing import Dict, Generic, Hashable, Iterator, List, Optional, TypeVar

from .exceptions import UnknownIdentifierError

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Hashable)

FIRST_IDENTIFIER = 1


class IdentityRegistry(Generic[P]):
    """
    Bidirectional payload <-> identifier mapping.

    Attributes:
        _payload_to_id (Dict[P, int]): Forward mapping
        _id_to_payload (Dict[int, P]): Reverse mapping, insertion ordered
        _next_id (int): Identifier handed out by the next ``resolve``
    """

    def __init__(self) -> None:
        self._payload_to_id: Dict[P, int] = {}
        self._id_to_payload: Dict[int, P] = {}
        self._next_id = FIRST_IDENTIFIER

    def resolve(self, payload: P) -> int:
        """
        Return the identifier of a payload, assigning a fresh one if needed.

        Raises:
            TypeError: If the payload is not hashable
        """
        identifier = self._payload_to_id.get(payload)
        if identifier is None:
            identifier = self._next_id
            self._next_id += 1
            self._payload_to_id[payload] = identifier
            self._id_to_payload[identifier] = payload
            logger.debug(f"Assigned identifier {identifier} to {payload!r}")
        return identifier

    def lookup(self, identifier: int) -> P:
        """
        Return the payload registered under an identifier.

        Raises:
            UnknownIdentifierError: If the identifier was never assigned or
                has been released
        """
        try:
            return self._id_to_payload[identifier]
        except KeyError:
            raise UnknownIdentifierError(identifier) from None

    def id_for(self, payload: P) -> Optional[int]:
        """Return the identifier of a payload without creating one."""
        return self._payload_to_id.get(payload)

    def release(self, payload: P) -> Optional[int]:
        """
        Forget a payload.

        The released identifier is retired; the counter is not rewound, so a
        later ``resolve`` of the same payload yields a new identifier.

        Returns:
            Optional[int]: The retired identifier, None if the payload was unknown
        """
        identifier = self._payload_to_id.pop(payload, None)
        if identifier is not None:
            del self._id_to_payload[identifier]
            logger.debug(f"Retired identifier {identifier} of {payload!r}")
        return identifier

    def clear(self) -> None:
        """Forget every payload. Retired identifiers stay retired."""
        self._payload_to_id.clear()
        self._id_to_payload.clear()

    def payloads(self) -> List[P]:
        """Snapshot of live payloads in identifier order."""
        return list(self._id_to_payload.values())

    def identifiers(self) -> List[int]:
        """Snapshot of live identifiers in assignment order."""
        return list(self._id_to_payload.keys())

    @property
    def next_identifier(self) -> int:
        return self._next_id

    def __contains__(self, payload: object) -> bool:
        try:
            return payload in self._payload_to_id
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._id_to_payload)

    def __iter__(self) -> Iterator[P]:
        return iter(self.payloads())
