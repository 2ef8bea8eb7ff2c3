import json
from pathlib import Path

import click

from hue_samples import load_hue_table
from recursive_colors import build_color_tokens, merge_tokens
from shadows import build_shadows, static_shadows

# ------------------------------------------------------------
# Assembly
# ------------------------------------------------------------


def build_tokens(
    hue_table,
    *,
    resolve_mix: bool = False,
    static: bool = False,
) -> dict[str, str]:
    """
    Single flat token table: base colors, every hue scale, black/white
    ramps, then shadows (parametrized or static).
    """
    tokens = build_color_tokens(hue_table, resolve_mix=resolve_mix)
    merge_tokens(tokens, static_shadows() if static else build_shadows())
    return tokens


def select_hues(hue_table: dict, hues: tuple[str, ...]) -> dict:
    if not hues:
        return hue_table
    unknown = [h for h in hues if h not in hue_table]
    if unknown:
        raise ValueError(f"Unknown hue(s): {', '.join(unknown)}")
    return {h: hue_table[h] for h in hues}


# ------------------------------------------------------------
# CLI
# ------------------------------------------------------------


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "--samples-csv",
    default="../data/raw/hue_samples.csv",
    show_default=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Hue ramp samples (columns hue, step, hex)",
)
@click.option(
    "--out-json",
    default="../data/processed/tokens.json",
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--hue",
    "hues",
    multiple=True,
    help="Only derive these hues (repeatable)",
)
@click.option(
    "--resolve-mix/--defer-mix",
    default=False,
    show_default=True,
    help="Compute extrapolated steps now instead of emitting color-mix()",
)
@click.option(
    "--static-shadows/--parametrized-shadows",
    "static",
    default=False,
    show_default=True,
    help="Substitute light-mode shadow color/strength into every shadow",
)
def main(
    samples_csv: Path,
    out_json: Path,
    hues: tuple[str, ...],
    resolve_mix: bool,
    static: bool,
):
    """
    Derive color scales and shadows and write them as one token table.
    """
    try:
        hue_table = select_hues(load_hue_table(samples_csv), hues)
        click.echo(f"[build_tokens] {len(hue_table)} hues from {samples_csv}")
        tokens = build_tokens(hue_table, resolve_mix=resolve_mix, static=static)
    except (ValueError, IndexError) as e:
        raise click.ClickException(str(e)) from e

    out_json.parent.mkdir(parents=True, exist_ok=True)
    out_json.write_text(json.dumps(tokens, indent=2))
    click.echo(f"✓ Wrote {out_json} ({len(tokens)} tokens)")


if __name__ == "__main__":
    main()
