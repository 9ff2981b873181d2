"""Bounded numeric values used for creature statistics."""

from __future__ import annotations

from dataclasses import dataclass

U8_MAX = 0xFF
U16_MAX = 0xFFFF


@dataclass
class RangeConfig:
    """Initial settings for a :class:`RangeValue`.

    ``ceiling`` is the largest value the statistic can ever hold; the floor
    is always zero. ``maximum`` defaults to the ceiling.
    """

    value: int = 0
    minimum: int = 0
    maximum: int | None = None
    ceiling: int = U16_MAX

    def __post_init__(self) -> None:
        if self.maximum is None:
            self.maximum = self.ceiling
        for label, number in (
            ("value", self.value),
            ("minimum", self.minimum),
            ("maximum", self.maximum),
        ):
            if not 0 <= number <= self.ceiling:
                raise ValueError(f"{label} {number} is outside 0..{self.ceiling}")


class RangeValue:
    """A number kept between a minimum and a maximum."""

    def __init__(self, config: RangeConfig) -> None:
        self.value = config.value
        self.minimum = config.minimum
        self.maximum = config.maximum
        self.default = config.value
        self.ceiling = config.ceiling
        self.clamp()

    def __repr__(self) -> str:
        return (
            f"RangeValue(value={self.value}, minimum={self.minimum}, "
            f"maximum={self.maximum}, default={self.default})"
        )

    def _check_amount(self, amount: int) -> None:
        if not 0 <= amount <= self.ceiling:
            raise ValueError(f"amount {amount} is outside 0..{self.ceiling}")

    def add(self, value: int) -> None:
        """Increase the value, saturating at the ceiling, then clamp."""
        self._check_amount(value)
        self.value = min(self.value + value, self.ceiling)
        self.clamp()

    def sub(self, value: int) -> None:
        """Decrease the value, saturating at zero, then clamp."""
        self._check_amount(value)
        self.value = max(self.value - value, 0)
        self.clamp()

    def clamp(self) -> None:
        if self.value > self.maximum:
            self.value = self.maximum
        if self.value < self.minimum:
            self.value = self.minimum

    def reset(self) -> None:
        """Restore the value the statistic was configured with."""
        self.value = self.default

    def set_max(self, maximum: int) -> None:
        self.maximum = maximum
        self.clamp()

    def set_min(self, minimum: int) -> None:
        self.minimum = minimum
        self.clamp()

    def is_max(self) -> bool:
        return self.value >= self.maximum

    def is_min(self) -> bool:
        return self.value <= self.minimum