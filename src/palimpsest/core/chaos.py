"""
Chaos controller.

Maps input length to a chaos level and tracks the irreversible maximum.
"""

from dataclasses import dataclass


@dataclass
class ChaosState:
    """Current and maximum chaos, both in [0, 1]."""

    chaos_level: float = 0.0  # current
    max_chaos: float = 0.0  # max ever reached (drives erosion)


class ChaosController:
    """
    Sole mutator of ChaosState.

    Lowering the input length lowers ``chaos_level`` but never
    ``max_chaos``; that is what makes erosion permanent.
    """

    def __init__(self, max_length: int = 400, state: ChaosState | None = None):
        if max_length <= 0:
            raise ValueError(f"max_length must be positive, got {max_length}")
        self.max_length = max_length
        self.state = state or ChaosState()

    @property
    def chaos_level(self) -> float:
        return self.state.chaos_level

    @property
    def max_chaos(self) -> float:
        return self.state.max_chaos

    def chaos_for_length(self, length: int) -> float:
        if length <= 0:
            return 0.0
        return min(max(length / self.max_length, 0.0), 1.0)

    def on_input_changed(self, length: int) -> bool:
        """
        Update chaos from the current input length.

        Returns:
            True; every input event requires a re-render.
        """
        self.state.chaos_level = self.chaos_for_length(length)
        self.state.max_chaos = max(self.state.max_chaos, self.state.chaos_level)
        return True
