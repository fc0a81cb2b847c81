"""Dataclasses shared by the response engine, CLI and web API."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from bodecalc.numeric.roots import RootSet
from bodecalc.util.math import finite_or_none


@dataclass(frozen=True)
class ResponsePoint:
    omega: float
    magnitude_db: float
    phase_deg: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.magnitude_db) and math.isfinite(self.phase_deg)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "omega": finite_or_none(self.omega),
            "magnitude_db": finite_or_none(self.magnitude_db),
            "phase_deg": finite_or_none(self.phase_deg),
        }


@dataclass(frozen=True)
class ResponseResult:
    numerator: Tuple[float, ...] = ()
    denominator: Tuple[float, ...] = ()
    sweep_points: Tuple[ResponsePoint, ...] = ()
    decade_points: Tuple[ResponsePoint, ...] = ()
    numerator_roots: RootSet = field(default_factory=RootSet)
    denominator_roots: RootSet = field(default_factory=RootSet)
    transfer_function_label: str = ""

    @classmethod
    def no_data(cls) -> "ResponseResult":
        return cls()

    @property
    def has_data(self) -> bool:
        return bool(self.numerator) and bool(self.denominator)

    @property
    def zeros(self) -> RootSet:
        return self.numerator_roots

    @property
    def poles(self) -> RootSet:
        return self.denominator_roots

    def to_dict(self) -> Dict[str, Any]:
        return {
            "has_data": self.has_data,
            "transfer_function": self.transfer_function_label,
            "numerator": [finite_or_none(c) for c in self.numerator],
            "denominator": [finite_or_none(c) for c in self.denominator],
            "sweep": [p.to_dict() for p in self.sweep_points],
            "table": [p.to_dict() for p in self.decade_points],
            "zeros": self.numerator_roots.to_dict(),
            "poles": self.denominator_roots.to_dict(),
        }
