from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Subject:
    """Domain entity: a resident as seen by the roster.

    Note: Accounts and credentials belong to the identity service; this is a read view.
    """

    user_id: int
    full_name: str
    email: str
    role: Role = Role.STUDENT
    is_active: bool = True
