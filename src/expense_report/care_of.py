"""Care-of relationships: a child's balance is settled through a guardian."""

import logging

from .exceptions import CareOfChainError, SelfCareOfError
from .participants import ParticipantId, ParticipantRegistry

logger = logging.getLogger(__name__)


class CareOfGraph:
    """Single-level child -> parent mapping.

    Registering a child again replaces its parent. A parent may look after
    several children, but nobody can be both a parent and a child.
    """

    def __init__(self, registry: ParticipantRegistry):
        self.registry = registry
        self._parents: dict[ParticipantId, ParticipantId] = {}

    def fold(self, child: str, parent: str) -> None:
        """
        Put ``child`` in the care of ``parent``.

        Raises:
            UnknownParticipantError: If either name is unknown
            SelfCareOfError: If child and parent are the same participant
            CareOfChainError: If the edge would create a multi-level chain
        """
        child_id = self.registry.index(child)
        parent_id = self.registry.index(parent)

        if child_id == parent_id:
            raise SelfCareOfError(child)

        if parent_id in self._parents:
            raise CareOfChainError(
                f"'{parent}' is in the care of "
                f"'{self.registry.name(self._parents[parent_id])}' "
                f"and cannot look after '{child}'"
            )

        if child_id in self._parents.values():
            raise CareOfChainError(
                f"'{child}' looks after other participants and cannot be "
                f"in the care of '{parent}'"
            )

        previous = self._parents.get(child_id)
        if previous is not None and previous != parent_id:
            logger.debug(
                f"Replacing guardian of {child}: "
                f"{self.registry.name(previous)} -> {parent}"
            )

        self._parents[child_id] = parent_id
        logger.debug(f"{child} is in the care of {parent}")

    def parent_of(self, participant_id: ParticipantId) -> ParticipantId | None:
        """Guardian of a participant, or None."""
        return self._parents.get(participant_id)

    def __len__(self) -> int:
        return len(self._parents)
