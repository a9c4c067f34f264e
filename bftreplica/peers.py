"""Peers of a replica and the rotating choice of view leaders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable


@dataclass(frozen=True)
class Peer:
    """Another replica: its id and the network identity used to reach it."""

    replica_id: int
    peer_id: Hashable


@dataclass(frozen=True)
class LeaderSchedule:
    """Round-robin leader rotation over the first ``num_leaders`` replicas.

    ``replica_id`` is the replica the schedule is consulted by.
    """

    replica_id: int
    num_leaders: int

    def __post_init__(self) -> None:
        if self.num_leaders <= 0:
            raise ValueError(f"a leader schedule needs at least one leader, got {self.num_leaders}")

    def leader_of(self, view: int) -> int:
        """Return the id of the replica that leads ``view``."""
        if view < 0:
            raise ValueError(f"views are non-negative, got {view}")
        return view % self.num_leaders

    def am_leader_of(self, view: int) -> bool:
        """True if this replica leads ``view``."""
        return self.replica_id == self.leader_of(view)


def remove_from_peers(peers: Iterable[Peer], replica_id: int) -> list[Peer]:
    """Return every peer except those with ``replica_id``, keeping their order."""
    return [peer for peer in peers if peer.replica_id != replica_id]


def keep_from_peers(peers: Iterable[Peer], replica_id: int) -> list[Peer]:
    """Return only the peers with ``replica_id``, keeping their order."""
    return [peer for peer in peers if peer.replica_id == replica_id]


def recipients_to_string(peers: Iterable[Peer]) -> str:
    """List the replica ids of ``peers``, each followed by a space."""
    return "".join(f"{peer.replica_id} " for peer in peers)