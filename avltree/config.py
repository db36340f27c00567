"""Configuration for AVLTree instances."""

from dataclasses import dataclass


@dataclass
class TreeConfig:
    """Per-tree behavior switches.

    Attributes:
        validate: Check every structural invariant after each mutation.
            Walks the whole tree, so mutations become O(n). Meant for tests
            and debugging.
        log_rotations: Emit a DEBUG record for each rotation performed.
    """

    validate: bool = False
    log_rotations: bool = True
