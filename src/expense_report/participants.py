"""Participant registry: names to dense integer identities."""

from collections.abc import Iterable, Iterator

from .exceptions import UnknownParticipantError

ParticipantId = int


class ParticipantRegistry:
    """Ordered, immutable set of participants.

    Identities are list positions, so registry order is also the iteration
    order the settlement engine depends on.
    """

    def __init__(self, names: Iterable[str]):
        """Initialize the registry from an ordered list of unique names."""
        self._names: tuple[str, ...] = tuple(names)
        self._indices: dict[str, ParticipantId] = {}

        for participant_id, name in enumerate(self._names):
            if name in self._indices:
                raise ValueError(f"Participant '{name}' is listed more than once")
            self._indices[name] = participant_id

    def index(self, name: str) -> ParticipantId:
        """
        Get the identity of a participant.

        Raises:
            UnknownParticipantError: If the name is not registered
        """
        try:
            return self._indices[name]
        except KeyError:
            raise UnknownParticipantError(name) from None

    def name(self, participant_id: ParticipantId) -> str:
        """Get the display name for a participant identity."""
        return self._names[participant_id]

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[ParticipantId]:
        return iter(range(len(self._names)))

    def __contains__(self, name: object) -> bool:
        return name in self._indices
