"""
Errors raised while reading a turn's board state.
"""


class MalformedSnapshotError(ValueError):
    """The move request is missing data or describes an impossible board."""
