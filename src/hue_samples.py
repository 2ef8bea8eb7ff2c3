from __future__ import annotations

import math
import re
from dataclasses import dataclass
from pathlib import Path

import colour
import numpy as np
import pandas as pd

# ------------------------------------------------------------
# Ramp shape
# ------------------------------------------------------------

SAMPLE_COUNT = 13  # steps 0..12, light to dark

HEX_RE = re.compile(r"^#?[0-9a-fA-F]{6}$")
HSL_RE = re.compile(r"^\s*(-?[\d.]+)\s+(-?[\d.]+)%?\s+(-?[\d.]+)%?\s*$")
HUE_NAME_RE = re.compile(r"^[a-z]+$")

REQUIRED_COLUMNS = {"hue", "step", "hex"}


# ------------------------------------------------------------
# Sample points
# ------------------------------------------------------------


@dataclass(frozen=True)
class HueSample:
    h: float
    s: float
    l: float

    def __post_init__(self):
        if not 0.0 <= self.h < 360.0:
            raise ValueError(f"hue out of range [0, 360): {self.h}")
        for name in ("s", "l"):
            v = getattr(self, name)
            if not 0.0 <= v <= 100.0:
                raise ValueError(f"{name} out of range [0, 100]: {v}")

    def to_hsl(self) -> str:
        """
        Space separated triple as used inside `hsl(...)`, e.g. "210 17% 98%".
        """
        h = round_half_up(self.h) % 360
        return f"{h} {round_half_up(self.s)}% {round_half_up(self.l)}%"


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def parse_hsl(hsl: str) -> HueSample:
    match = HSL_RE.match(hsl)
    if not match:
        raise ValueError(f"Not an HSL triple: {hsl!r}")
    h, s, l = (float(x) for x in match.groups())
    return HueSample(h % 360.0, s, l)


def sample_key(hue: str, step: int) -> str:
    return f"--{hue}-{step}-hsl"


# ------------------------------------------------------------
# Hex -> HSL (colour)
# ------------------------------------------------------------


def hex_to_sample(hex_color: str) -> HueSample:
    """
    Convert "#rrggbb" to an HSL sample rounded to whole degrees / percents.
    """
    if not isinstance(hex_color, str) or not HEX_RE.match(hex_color):
        raise ValueError(f"Malformed hex color: {hex_color!r}")

    rgb = colour.notation.HEX_to_RGB(hex_color.lstrip("#"))
    h, s, l = np.asarray(colour.RGB_to_HSL(rgb), dtype=float)

    return HueSample(
        h=float(round_half_up(h * 360.0) % 360),
        s=float(round_half_up(s * 100.0)),
        l=float(round_half_up(l * 100.0)),
    )


# ------------------------------------------------------------
# Table loading
# ------------------------------------------------------------


def samples_from_frame(df: pd.DataFrame) -> dict[str, dict[str, HueSample]]:
    """
    Build { hue: { "--hue-<step>-hsl": HueSample } } from a tidy frame with
    columns hue, step, hex. Hues keep their first-appearance order, samples
    are ordered by step.
    """
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Sample table is missing columns: {sorted(missing)}")

    table = {}
    for hue, sub in df.groupby("hue", sort=False):
        sub = sub.sort_values("step")
        hue = str(hue)
        if not HUE_NAME_RE.match(hue):
            raise ValueError(f"Hue names must be lowercase letters only: {hue!r}")
        table[hue] = {
            sample_key(hue, int(row.step)): hex_to_sample(row.hex)
            for row in sub.itertuples()
        }

    return table


def load_hue_table(path: str | Path) -> dict[str, dict[str, HueSample]]:
    path = Path(path)
    df = pd.read_csv(path)
    if df.empty:
        raise ValueError(f"No samples found in {path}")
    return samples_from_frame(df)
