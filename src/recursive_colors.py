from __future__ import annotations

import re
from typing import Mapping

from color_mix import (
    BASE_BLACK,
    BASE_BLACK_VAR,
    BASE_WHITE,
    BASE_WHITE_VAR,
    color_mix_expr,
    mix_oklch,
    mix_percentage,
)
from hue_samples import SAMPLE_COUNT, HueSample

# ============================================================
# Contextual color scale
#
# --<hue>-0 / --<hue>  most vivid sample (primary)
# light mode:  <hue>-1..10  shades (backgrounds)
#              <hue>--1..10 tints  (foregrounds)
# dark mode flips the roles: positive = tints, negative = shades
# ============================================================

DARK_ANCHOR_INDICES = (9, 10, 11, 12)
LIGHT_ANCHOR_INDICES = (7, 6, 5, 4, 3, 2, 1, 0)

STEPS = 10
DARK_SUFFIX = "-@media:dark"

HUE_KEY_RE = re.compile(r"--([a-z]+)-")

BASE_COLORS = {
    BASE_WHITE_VAR: "hsl(0 0% 100%)",
    BASE_BLACK_VAR: "hsl(0 0% 0%)",
}

# lightness per step 0..10
BLACK_L = (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95)
BLACK_L_DARK = (100, 90, 80, 70, 60, 50, 40, 30, 20, 10, 5)
WHITE_L = (100, 95, 90, 85, 80, 75, 70, 65, 60, 55, 50)
WHITE_L_DARK = (0, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50)


def contrast_colors() -> dict[str, str]:
    """
    Fixed black/white ramps; dark mode swaps which end is the foreground.
    """
    out = {}
    for name, light, dark in (
        ("black", BLACK_L, BLACK_L_DARK),
        ("white", WHITE_L, WHITE_L_DARK),
    ):
        for i, l in enumerate(light):
            out[f"--color-{name}-{i}"] = f"hsl(0 0% {l}%)"
        for i, l in enumerate(dark):
            out[f"--color-{name}-{i}{DARK_SUFFIX}"] = f"hsl(0 0% {l}%)"
    return out


# ------------------------------------------------------------
# Primary selection
# ------------------------------------------------------------


def vividness(sample: HueSample) -> float:
    # high saturation, lightness close to 50
    return sample.s + (50.0 - abs(sample.l - 50.0))


def select_primary(samples: list[HueSample]) -> int:
    """
    Index of the most vivid sample. Strict comparison keeps the first of
    equally scored samples.
    """
    best_index = 0
    best_score = float("-inf")
    for index, sample in enumerate(samples):
        score = vividness(sample)
        if score > best_score:
            best_score = score
            best_index = index
    return best_index


def hue_name_from_key(key: str) -> str:
    match = HUE_KEY_RE.match(key)
    if not match:
        raise ValueError(f"Cannot extract hue name from key {key!r}")
    return match.group(1)


# ------------------------------------------------------------
# Ramps
# ------------------------------------------------------------


def extend_ramp(anchors, reference, reference_var, steps, resolve_mix):
    """
    Anchors verbatim, then the last anchor mixed toward the reference color,
    MIX_STEP_PERCENT per extra step.
    """
    ramp = [a.to_hsl() for a in anchors]
    last = anchors[-1]
    for extra in range(1, steps - len(anchors) + 1):
        pct = mix_percentage(extra)
        if resolve_mix:
            ramp.append(mix_oklch(last, reference, pct).to_hsl())
        else:
            ramp.append(color_mix_expr(last, reference_var, pct))
    return ramp


def create_recursive_colors(
    samples: Mapping[str, HueSample],
    *,
    resolve_mix: bool = False,
) -> dict[str, str]:
    """
    Derive the contextual scale for one hue from its 13 ramp samples
    (keys like "--gray-0-hsl", light to dark).

    With resolve_mix the extrapolated steps are computed here in OKLCH
    instead of being emitted as color-mix() expressions.
    """
    entries = list(samples.items())
    if not entries:
        raise IndexError("Empty sample set")

    name = hue_name_from_key(entries[0][0])

    if len(entries) < SAMPLE_COUNT:
        raise IndexError(
            f"{name}: expected {SAMPLE_COUNT} samples, got {len(entries)}"
        )
    if len(entries) > SAMPLE_COUNT:
        raise ValueError(
            f"{name}: expected {SAMPLE_COUNT} samples, got {len(entries)}"
        )

    values = [v for _, v in entries]
    primary = values[select_primary(values)].to_hsl()

    shades = extend_ramp(
        [values[i] for i in DARK_ANCHOR_INDICES],
        BASE_BLACK,
        BASE_BLACK_VAR,
        STEPS,
        resolve_mix,
    )
    tints = extend_ramp(
        [values[i] for i in LIGHT_ANCHOR_INDICES],
        BASE_WHITE,
        BASE_WHITE_VAR,
        STEPS,
        resolve_mix,
    )

    result = {}
    for suffix, backgrounds, foregrounds in (
        ("", shades, tints),
        (DARK_SUFFIX, tints, shades),
    ):
        result[f"--{name}-0-hsl{suffix}"] = primary
        result[f"--{name}-hsl{suffix}"] = primary
        for i in range(1, STEPS + 1):
            result[f"--{name}-{i}-hsl{suffix}"] = backgrounds[i - 1]
        for i in range(1, STEPS + 1):
            result[f"--{name}--{i}-hsl{suffix}"] = foregrounds[i - 1]

    return result


# ------------------------------------------------------------
# All hues
# ------------------------------------------------------------


def merge_tokens(target: dict[str, str], tokens: Mapping[str, str]) -> None:
    dupes = target.keys() & tokens.keys()
    if dupes:
        raise ValueError(f"Duplicate token names: {sorted(dupes)[:5]}")
    target.update(tokens)


def build_color_tokens(
    hue_table: Mapping[str, Mapping[str, HueSample]],
    *,
    resolve_mix: bool = False,
) -> dict[str, str]:
    tokens = dict(BASE_COLORS)
    for samples in hue_table.values():
        merge_tokens(tokens, create_recursive_colors(samples, resolve_mix=resolve_mix))
    merge_tokens(tokens, contrast_colors())
    return tokens
