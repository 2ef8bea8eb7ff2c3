from __future__ import annotations

from dataclasses import dataclass

# ============================================================
# Parameters (light default, dark default)
# ============================================================

SHADOW_COLOR = "--shadow-color"
SHADOW_STRENGTH = "--shadow-strength"
INNER_HIGHLIGHT = "--inner-shadow-highlight"

DARK_SUFFIX = "-@media:dark"

SHADOW_PARAMS = {
    SHADOW_COLOR: ("220 3% 15%", "220 40% 2%"),
    SHADOW_STRENGTH: ("1%", "25%"),
}

INNER_HIGHLIGHT_VALUES = (
    "inset 0 -.5px 0 0 #fff, inset 0 .5px 0 0 #0001",
    "inset 0 -.5px 0 0 #fff1, inset 0 .5px 0 0 #0007",
)


# ============================================================
# Recipes
# ============================================================


@dataclass(frozen=True)
class ShadowLayer:
    y: int
    blur: int
    spread: int
    alpha: int  # percent added on top of --shadow-strength
    inset: bool = False

    def render(self) -> str:
        prefix = "inset " if self.inset else ""
        return (
            f"{prefix}0 {px(self.y)} {px(self.blur)} {px(self.spread)} "
            f"hsl(var({SHADOW_COLOR}) / calc(var({SHADOW_STRENGTH}) + {self.alpha}%))"
        )


def px(v: int) -> str:
    return "0" if v == 0 else f"{v}px"


# (y, blur, spread, alpha) per layer, drop shadows 1..10
DROP_SHADOWS = {
    1: [(1, 2, -1, 9)],
    2: [(3, 5, -2, 3), (7, 14, -5, 5)],
    3: [(-1, 3, 0, 2), (1, 2, -5, 2), (2, 5, -5, 4), (4, 12, -5, 5), (12, 15, -5, 7)],
    4: [
        (-2, 5, 0, 2),
        (1, 1, -2, 3),
        (2, 2, -2, 3),
        (5, 5, -2, 4),
        (9, 9, -2, 5),
        (16, 16, -2, 6),
    ],
    5: [
        (-1, 2, 0, 2),
        (2, 1, -2, 3),
        (5, 5, -2, 3),
        (10, 10, -2, 4),
        (20, 20, -2, 5),
        (40, 40, -2, 7),
    ],
    6: [
        (-1, 2, 0, 2),
        (3, 2, -2, 3),
        (7, 5, -2, 3),
        (12, 10, -2, 4),
        (22, 18, -2, 5),
        (41, 33, -2, 6),
        (100, 80, -2, 7),
    ],
    7: [
        (-1, 2, 0, 2),
        (4, 3, -2, 3),
        (9, 7, -2, 3),
        (16, 14, -2, 4),
        (28, 24, -2, 5),
        (52, 44, -2, 6),
        (130, 100, -2, 7),
        (200, 140, -2, 8),
    ],
    8: [
        (-1, 2, 0, 2),
        (5, 4, -2, 3),
        (11, 9, -2, 3),
        (20, 16, -2, 4),
        (36, 28, -2, 5),
        (65, 50, -2, 6),
        (160, 120, -2, 7),
        (250, 180, -2, 8),
    ],
    9: [
        (-1, 2, 0, 2),
        (6, 5, -2, 3),
        (13, 11, -2, 3),
        (24, 20, -2, 4),
        (44, 36, -2, 5),
        (80, 64, -2, 6),
        (200, 150, -2, 7),
        (320, 240, -2, 8),
    ],
    10: [
        (-1, 2, 0, 2),
        (7, 6, -2, 3),
        (15, 13, -2, 3),
        (28, 24, -2, 4),
        (52, 44, -2, 5),
        (96, 80, -2, 6),
        (240, 180, -2, 7),
        (400, 300, -2, 8),
    ],
}

# (y, blur, alpha) per inner shadow 1..10; 0 is a 1px ring
INNER_SHADOWS = {
    1: (1, 2, 9),
    2: (1, 4, 9),
    3: (2, 8, 9),
    4: (2, 14, 9),
    5: (3, 20, 9),
    6: (4, 28, 10),
    7: (5, 36, 11),
    8: (6, 48, 12),
    9: (8, 64, 13),
    10: (10, 80, 14),
}


def render_layers(layers: list[ShadowLayer]) -> str:
    if len(layers) == 1:
        return layers[0].render()
    return "\n    " + ",\n    ".join(layer.render() for layer in layers)


def drop_shadow(level: int) -> str:
    return render_layers([ShadowLayer(*spec) for spec in DROP_SHADOWS[level]])


def inner_shadow(level: int) -> str:
    if level == 0:
        return ShadowLayer(0, 0, 1, 9, inset=True).render()
    y, blur, alpha = INNER_SHADOWS[level]
    layer = ShadowLayer(y, blur, 0, alpha, inset=True)
    return f"{layer.render()}, var({INNER_HIGHLIGHT})"


# ============================================================
# Tables
# ============================================================


def build_shadows() -> dict[str, str]:
    """
    Parametrized table: shadows reference var(--shadow-color) and
    var(--shadow-strength) so they can be re-themed at presentation time.
    """
    table = {}
    for name, (light, _) in SHADOW_PARAMS.items():
        table[name] = light
    for name, (_, dark) in SHADOW_PARAMS.items():
        table[f"{name}{DARK_SUFFIX}"] = dark

    table[INNER_HIGHLIGHT] = INNER_HIGHLIGHT_VALUES[0]
    table[f"{INNER_HIGHLIGHT}{DARK_SUFFIX}"] = INNER_HIGHLIGHT_VALUES[1]

    for level in DROP_SHADOWS:
        table[f"--shadow-{level}"] = drop_shadow(level)
    for level in range(0, 11):
        table[f"--inner-shadow-{level}"] = inner_shadow(level)

    return table


def is_param_key(key: str) -> bool:
    return key in SHADOW_PARAMS


def resolve_shadow(value: str) -> str:
    for name, (light, _) in SHADOW_PARAMS.items():
        value = value.replace(f"var({name})", light)
    return value


def static_shadows(shadows: dict[str, str] | None = None) -> dict[str, str]:
    """
    Shadows with the light-mode parameter defaults substituted in; the
    light parameter definitions themselves are dropped, dark-mode ones kept.
    """
    if shadows is None:
        shadows = build_shadows()
    return {
        key: resolve_shadow(value)
        for key, value in shadows.items()
        if not is_param_key(key)
    }
