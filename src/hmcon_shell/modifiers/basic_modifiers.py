# src/hmcon_shell/modifiers/basic_modifiers.py
import logging
from typing import List

import numpy as np

from hmcon_shell.core.command_registry import CommandRegistry
from hmcon_shell.core.errors import UserInputError
from hmcon_shell.core.modification_chain import Modifier
from hmcon_shell.formats.height_data import HeightData

logger = logging.getLogger(__name__)


class OffsetModifier(Modifier):
    def __init__(self, amount: float):
        self.amount = amount

    def apply(self, data: HeightData) -> HeightData:
        return data.with_grid(data.grid + self.amount)

    def describe(self) -> str:
        return f"offset {self.amount:g}"


class ScaleModifier(Modifier):
    def __init__(self, factor: float):
        self.factor = factor

    def apply(self, data: HeightData) -> HeightData:
        return data.with_grid(data.grid * self.factor)

    def describe(self) -> str:
        return f"scale {self.factor:g}"


class ClampModifier(Modifier):
    def __init__(self, low: float, high: float):
        if low > high:
            raise UserInputError(f"Lower bound {low:g} is above upper bound {high:g}.")
        self.low = low
        self.high = high

    def apply(self, data: HeightData) -> HeightData:
        # np.clip keeps NaN (nodata) cells as they are
        return data.with_grid(np.clip(data.grid, self.low, self.high))

    def describe(self) -> str:
        return f"clamp {self.low:g} {self.high:g}"


def _floats(args: List[str], count: int) -> List[float]:
    if len(args) < count:
        raise UserInputError("Not enough arguments.")
    try:
        return [float(a) for a in args[:count]]
    except ValueError as e:
        raise UserInputError(f"Expected a number: {e}") from e


def build_offset(args: List[str], _ctx) -> Modifier:
    (amount,) = _floats(args, 1)
    return OffsetModifier(amount)


def build_scale(args: List[str], _ctx) -> Modifier:
    (factor,) = _floats(args, 1)
    return ScaleModifier(factor)


def build_clamp(args: List[str], _ctx) -> Modifier:
    low, high = _floats(args, 2)
    return ClampModifier(low, high)


def register(registry: CommandRegistry) -> None:
    registry.register_modifier("offset", build_offset, description="Adds a value to every height", args="<amount>")
    registry.register_modifier("scale", build_scale, description="Multiplies every height", args="<factor>")
    registry.register_modifier("clamp", build_clamp, description="Limits heights to a range", args="<low> <high>")
