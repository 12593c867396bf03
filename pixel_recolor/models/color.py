from __future__ import annotations
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    """
    Value-object for one RGBA color with 8-bit channels.
    `==` compares all four channels; use `rgb_equals` to ignore alpha.
    """
    red: int
    green: int
    blue: int
    alpha: int = 255  # fully opaque unless encoded explicitly

    # ── Packed ARGB (0xAARRGGBB) ─────────────────────────────────────
    @property
    def argb(self) -> int:
        return (
            (self.alpha & 0xFF) << 24
            | (self.red & 0xFF) << 16
            | (self.green & 0xFF) << 8
            | (self.blue & 0xFF)
        )

    @classmethod
    def from_argb(cls, value: int) -> "Color":
        """Split a packed 32-bit ARGB value into its channels."""
        return cls(
            red=value >> 16 & 0xFF,
            green=value >> 8 & 0xFF,
            blue=value & 0xFF,
            alpha=value >> 24 & 0xFF,
        )

    def rgb_equals(self, other: "Color") -> bool:
        return (self.red, self.green, self.blue) == (other.red, other.green, other.blue)

    def with_alpha(self, alpha: int) -> "Color":
        return replace(self, alpha=alpha & 0xFF)

    def __str__(self) -> str:
        return f"#{self.argb:08X}"
