#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Bounds, steps and display units of the numeric event fields."""

from __future__ import annotations

from decimal import Decimal

from attrs import define, field

MINUTE_MS = 60 * 1000


def _decimals(step: float) -> int:
    exponent = Decimal(str(step)).normalize().as_tuple().exponent
    return max(0, -exponent) if isinstance(exponent, int) else 0


def compute_new_value(
    value: float,
    minimum: float | None = None,
    maximum: float | None = None,
    step: float | None = None,
) -> float:
    """Clamp ``value`` to the bounds and round it to the precision of ``step``."""
    if minimum is not None:
        value = max(value, minimum)
    if maximum is not None:
        value = min(value, maximum)
    if step:
        value = round(value, _decimals(step))
    return value


@define(frozen=True, slots=True)
class NumberField:
    """How a numeric field is entered.

    ``factor`` converts the displayed unit to the stored one (minutes to
    milliseconds for durations).
    """

    name: str
    unit: str
    minimum: float | None = field(default=None)
    maximum: float | None = field(default=None)
    step: float = field(default=1)
    factor: int = field(default=1)

    def to_display(self, stored: float | None) -> float | None:
        if stored is None:
            return None
        shown = stored / self.factor
        return int(shown) if float(shown).is_integer() else shown

    def to_stored(self, displayed: float) -> float:
        value = compute_new_value(displayed, self.minimum, self.maximum, self.step) * self.factor
        return int(value) if float(value).is_integer() else value


VOLUME = NumberField("volume", "ml", minimum=0, maximum=1000, step=5)
FORMULA_MILK_VOLUME = NumberField("formula_milk_volume", "ml", minimum=0, maximum=1000, step=5)
DURATION = NumberField("duration", "min", minimum=0, maximum=60, step=1, factor=MINUTE_MS)
LEFT_DURATION = NumberField("left_duration", "min", minimum=0, maximum=60, step=1, factor=MINUTE_MS)
RIGHT_DURATION = NumberField("right_duration", "min", minimum=0, maximum=60, step=1, factor=MINUTE_MS)
HEIGHT = NumberField("height", "cm", minimum=0, maximum=300, step=1)
WEIGHT = NumberField("weight", "kg", minimum=0, maximum=100, step=0.1)

DIALOG_FIELDS = {
    f.name: f
    for f in (VOLUME, FORMULA_MILK_VOLUME, DURATION, LEFT_DURATION, RIGHT_DURATION, HEIGHT, WEIGHT)
}

# The grid's nursing inputs have no bounds.
INLINE_LEFT_DURATION = NumberField("left_duration", "mn", step=1, factor=MINUTE_MS)
INLINE_RIGHT_DURATION = NumberField("right_duration", "mn", step=1, factor=MINUTE_MS)


# 🔼⚙️🔚
