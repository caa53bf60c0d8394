"""utils – numeric helpers (half-up rounding, clamping)."""

from .numeric import clamp, round_half_up, round_to_int

__all__ = ["clamp", "round_half_up", "round_to_int"]
