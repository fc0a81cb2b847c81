"""Built-in transfer-function presets used as CLI and web defaults."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Preset:
    name: str
    numerator: str
    denominator: str
    freq_min: float = 0.001
    freq_max: float = 100.0
    num_points: int = 200
    description: str = ""


DEFAULT_PRESET_NAME = "default"


def default_presets() -> Dict[str, Preset]:
    presets = [
        Preset(
            name=DEFAULT_PRESET_NAME,
            numerator="1",
            denominator="1 0.1 0.01",
            description="Lightly damped second-order system, 1 / (s^2 + 0.1s + 0.01)",
        ),
        Preset(
            name="first_order_lowpass",
            numerator="1",
            denominator="1 1",
            description="1 / (s + 1), corner at 1 rad/s",
        ),
        Preset(
            name="lead_compensator",
            numerator="1 1",
            denominator="1 10",
            description="(s + 1) / (s + 10), phase lead between 1 and 10 rad/s",
        ),
        Preset(
            name="double_pole",
            numerator="1",
            denominator="1 2 1",
            description="1 / (s + 1)^2, repeated real pole",
        ),
        Preset(
            name="undamped_resonance",
            numerator="1",
            denominator="1 0 1",
            num_points=201,
            description="1 / (s^2 + 1), poles on the imaginary axis at +/-1 rad/s",
        ),
    ]
    return {p.name: p for p in presets}


def get_preset(name: Optional[str]) -> Optional[Preset]:
    if not name:
        return None
    return default_presets().get(str(name).strip().lower())


def serialize_presets() -> Dict[str, Any]:
    ordered = sorted(default_presets().values(), key=lambda p: p.name)
    return {"presets": [asdict(p) for p in ordered]}
