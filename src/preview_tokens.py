import json
import re
from pathlib import Path

import click
import colour
import numpy as np
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from hue_samples import parse_hsl
from recursive_colors import DARK_SUFFIX, STEPS

HSL_FN_RE = re.compile(r"^hsl\((.*)\)$")

# ------------------------------------------------------------
# Color helpers
# ------------------------------------------------------------


def token_hex(value: str) -> str | None:
    """
    Hex for a literal HSL token ("h s% l%" or "hsl(h s% l%)");
    None for deferred color-mix() values.
    """
    m = HSL_FN_RE.match(value.strip())
    if m:
        value = m.group(1)
    try:
        sample = parse_hsl(value)
    except ValueError:
        return None

    rgb = colour.HSL_to_RGB(np.array([sample.h / 360.0, sample.s / 100.0, sample.l / 100.0]))
    return colour.notation.RGB_to_HEX(np.clip(rgb, 0.0, 1.0)).lower()


def swatch(hex_color: str | None) -> Text:
    if hex_color is None:
        return Text("  mix  ", style="dim")
    return Text("       ", style=Style(bgcolor=hex_color))


# ------------------------------------------------------------
# Table
# ------------------------------------------------------------


def hue_rows(tokens: dict[str, str], hue: str, dark: bool):
    suffix = DARK_SUFFIX if dark else ""
    names = [f"--{hue}--{i}-hsl{suffix}" for i in range(STEPS, 0, -1)]
    names.append(f"--{hue}-0-hsl{suffix}")
    names += [f"--{hue}-{i}-hsl{suffix}" for i in range(1, STEPS + 1)]
    for name in names:
        if name in tokens:
            yield name, tokens[name]


def render_hue_table(tokens: dict[str, str], hue: str, dark: bool) -> Table:
    mode = "dark" if dark else "light"
    table = Table(title=f"{hue} ({mode})", show_lines=False)
    table.add_column("Token", style="bold")
    table.add_column("Value")
    table.add_column("Hex")
    table.add_column("Swatch")

    for name, value in hue_rows(tokens, hue, dark):
        hx = token_hex(value)
        table.add_row(name, value, hx or "", swatch(hx))

    return table


def hues_in(tokens: dict[str, str]) -> list[str]:
    seen = []
    for key in tokens:
        m = re.match(r"^--([a-z]+)-hsl$", key)
        if m and m.group(1) not in seen:
            seen.append(m.group(1))
    return seen


# ------------------------------------------------------------
# CLI
# ------------------------------------------------------------


@click.command()
@click.argument(
    "tokens_json",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--hue", "hues", multiple=True, help="Hues to show (default: all)")
@click.option("--dark", is_flag=True, help="Show dark-mode values")
def preview(tokens_json: Path, hues: tuple[str, ...], dark: bool):
    """
    Print hue scales from a token table with terminal swatches.
    """
    tokens = json.loads(tokens_json.read_text())

    available = hues_in(tokens)
    if not available:
        raise click.ClickException(f"No hue scales found in {tokens_json}")

    missing = [h for h in hues if h not in available]
    if missing:
        raise click.ClickException(f"Unknown hue(s): {', '.join(missing)}")

    console = Console()
    for hue in hues or available:
        console.print(render_hue_table(tokens, hue, dark))


if __name__ == "__main__":
    preview()
