from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Subject


class UserRepository(Protocol):
    """Roster provider.

    Note (DIP): report services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[Subject]:
        raise NotImplementedError

    def list_roster(self) -> Sequence[Subject]:
        """Active students eligible for mess reports, ordered by name."""

        raise NotImplementedError
