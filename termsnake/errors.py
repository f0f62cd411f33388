from __future__ import annotations


class InvariantViolation(RuntimeError):
    """Raised when game state breaks an invariant. Indicates a bug, not a play outcome."""
