"""Members of the social network."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class User:
    """A member of the network, with the ids of their friends."""

    id: int = 0
    name: str = ""
    year: int = 0
    zip_code: int = 0
    friends: set[int] = field(default_factory=set)

    def add_friend(self, friend_id: int) -> None:
        """Record ``friend_id`` as a friend; adding twice changes nothing."""
        self.friends.add(friend_id)

    def delete_friend(self, friend_id: int) -> None:
        """Forget ``friend_id`` as a friend, if it is one."""
        self.friends.discard(friend_id)