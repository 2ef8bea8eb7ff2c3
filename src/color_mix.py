from __future__ import annotations

import math
from typing import Tuple

import colour
import numpy as np

from hue_samples import HueSample

# ============================================================
# Mix references / step sizes
# ============================================================

BASE_WHITE_VAR = "--base-white"
BASE_BLACK_VAR = "--base-black"

BASE_WHITE = HueSample(0.0, 0.0, 100.0)
BASE_BLACK = HueSample(0.0, 0.0, 0.0)

MIX_STEP_PERCENT = 5  # per step beyond the sampled ramp
MIX_CAP_PERCENT = 95

ACHROMATIC_C = 1e-3  # OKLCH chroma below which hue is powerless


def mix_percentage(steps_beyond: int) -> int:
    return min(MIX_CAP_PERCENT, steps_beyond * MIX_STEP_PERCENT)


# ============================================================
# Deferred mix (resolved by the styling engine)
# ============================================================


def color_mix_expr(sample: HueSample, reference_var: str, percentage: int) -> str:
    return (
        f"color-mix(in oklch, hsl({sample.to_hsl()}), "
        f"var({reference_var}) {percentage}%)"
    )


# ============================================================
# Eager mix (OKLCH via colour)
# ============================================================


def sample_to_oklch(sample: HueSample) -> Tuple[float, float, float]:
    hsl = np.array([sample.h / 360.0, sample.s / 100.0, sample.l / 100.0])
    xyz = colour.sRGB_to_XYZ(colour.HSL_to_RGB(hsl))
    L, a, b = np.asarray(colour.XYZ_to_Oklab(xyz), dtype=float)
    C = math.sqrt(a * a + b * b)
    h = (math.degrees(math.atan2(b, a)) % 360.0) if C > ACHROMATIC_C else float("nan")
    return (float(L), float(C), h)


def oklch_to_sample(L: float, C: float, h: float) -> HueSample:
    hr = math.radians(0.0 if math.isnan(h) else h)
    lab = np.array([L, C * math.cos(hr), C * math.sin(hr)])
    rgb = colour.XYZ_to_sRGB(colour.Oklab_to_XYZ(lab))
    rgb = np.clip(np.asarray(rgb, dtype=float), 0.0, 1.0)
    H, S, L_ = np.asarray(colour.RGB_to_HSL(rgb), dtype=float)
    return HueSample(
        h=float(H * 360.0) % 360.0,
        s=float(np.clip(S * 100.0, 0.0, 100.0)),
        l=float(np.clip(L_ * 100.0, 0.0, 100.0)),
    )


def mix_hue(h1: float, h2: float, t: float) -> float:
    """
    Shorter-arc hue interpolation; a NaN (powerless) hue takes the other side.
    """
    if math.isnan(h1) and math.isnan(h2):
        return float("nan")
    if math.isnan(h1):
        return h2
    if math.isnan(h2):
        return h1
    d = ((h2 - h1 + 180.0) % 360.0) - 180.0  # signed in [-180,180)
    return (h1 + d * t) % 360.0


def mix_oklch(a: HueSample, b: HueSample, percentage: float) -> HueSample:
    """
    Same result a browser gives for
    `color-mix(in oklch, hsl(a), hsl(b) <percentage>%)`.
    """
    t = percentage / 100.0
    L1, C1, h1 = sample_to_oklch(a)
    L2, C2, h2 = sample_to_oklch(b)
    return oklch_to_sample(
        L1 + (L2 - L1) * t,
        C1 + (C2 - C1) * t,
        mix_hue(h1, h2, t),
    )
