"""Data types and bookkeeping for leader-based Byzantine fault tolerant replicas."""

__version__ = "0.1.0"

__all__ = [
    "accumulator",
    "block",
    "clients",
    "group",
    "hashing",
    "peers",
]