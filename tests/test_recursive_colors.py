"""
Tests for the contextual color scale.

Tests cover:
- Primary selection and tie-breaking
- Shade/tint ramps and extrapolated mix steps
- Dark-mode role swap
- Fixed black/white ramps and full table assembly
"""

import pytest

from color_mix import mix_percentage
from conftest import make_samples
from hue_samples import HueSample, load_hue_table, parse_hsl
from recursive_colors import (
    BASE_COLORS,
    DARK_ANCHOR_INDICES,
    LIGHT_ANCHOR_INDICES,
    build_color_tokens,
    contrast_colors,
    create_recursive_colors,
    hue_name_from_key,
    select_primary,
    vividness,
)

DARK = "-@media:dark"


class TestPrimarySelection:
    """Tests for picking the most vivid sample."""

    def test_vividness(self):
        """Saturation plus closeness of lightness to 50."""
        assert vividness(HueSample(0, 80, 50)) == 130
        assert vividness(HueSample(0, 80, 90)) == 90
        assert vividness(HueSample(0, 0, 10)) == 10

    def test_picks_highest_score(self, test_samples):
        """Mid-lightness sample wins for a flat-saturation ramp."""
        assert select_primary(list(test_samples.values())) == 6

    def test_tie_keeps_lower_index(self):
        """Equal maximal scores resolve to the first sample."""
        samples = make_samples(
            overrides={3: HueSample(10, 90, 50), 8: HueSample(300, 90, 50)}
        )
        assert select_primary(list(samples.values())) == 3
        tokens = create_recursive_colors(samples)
        assert tokens["--test-hsl"] == "10 90% 50%"

    def test_all_tied(self):
        """Degenerate ramp picks index 0."""
        samples = [HueSample(i * 10.0, 0, 50) for i in range(13)]
        assert select_primary(samples) == 0


class TestHueName:
    """Tests for reading the hue name out of sample keys."""

    def test_extracts_name(self):
        assert hue_name_from_key("--gray-0-hsl") == "gray"

    def test_malformed_key(self):
        """Keys without the --<name>- prefix are rejected."""
        with pytest.raises(ValueError):
            hue_name_from_key("gray-0-hsl")
        with pytest.raises(ValueError):
            hue_name_from_key("--Gray-0-hsl")

    def test_malformed_key_emits_nothing(self):
        samples = {f"bad{i}": HueSample(0, 0, 50) for i in range(13)}
        with pytest.raises(ValueError):
            create_recursive_colors(samples)


class TestRamps:
    """Tests for shade and tint derivation."""

    def test_anchor_indices(self):
        assert DARK_ANCHOR_INDICES == (9, 10, 11, 12)
        assert LIGHT_ANCHOR_INDICES == (7, 6, 5, 4, 3, 2, 1, 0)

    def test_primary_aliases(self, test_samples):
        """--H-0 and --H carry the same value in both modes."""
        tokens = create_recursive_colors(test_samples)
        assert tokens["--test-0-hsl"] == tokens["--test-hsl"] == "200 20% 53%"
        assert tokens[f"--test-0-hsl{DARK}"] == tokens[f"--test-hsl{DARK}"] == "200 20% 53%"

    def test_shades_from_darkest_samples(self, test_samples):
        tokens = create_recursive_colors(test_samples)
        values = list(test_samples.values())
        for step, index in enumerate(DARK_ANCHOR_INDICES, start=1):
            assert tokens[f"--test-{step}-hsl"] == values[index].to_hsl()

    def test_tints_from_light_samples(self, test_samples):
        tokens = create_recursive_colors(test_samples)
        values = list(test_samples.values())
        for step, index in enumerate(LIGHT_ANCHOR_INDICES, start=1):
            assert tokens[f"--test--{step}-hsl"] == values[index].to_hsl()

    def test_shade_boundary_unmixed(self):
        """Step 4 is sample 12 verbatim; step 5 starts mixing toward black."""
        samples = make_samples(overrides={12: HueSample(0, 50, 10)})
        tokens = create_recursive_colors(samples)
        assert tokens["--test-4-hsl"] == "0 50% 10%"
        assert tokens["--test-5-hsl"] == (
            "color-mix(in oklch, hsl(0 50% 10%), var(--base-black) 5%)"
        )

    def test_shade_mix_percentages(self, test_samples):
        tokens = create_recursive_colors(test_samples)
        for i in range(5, 11):
            pct = min(95, (i - 4) * 5)
            assert tokens[f"--test-{i}-hsl"] == (
                f"color-mix(in oklch, hsl(200 20% 11%), var(--base-black) {pct}%)"
            )

    def test_tint_mix_percentages(self, test_samples):
        tokens = create_recursive_colors(test_samples)
        assert tokens["--test--9-hsl"] == (
            "color-mix(in oklch, hsl(200 20% 95%), var(--base-white) 5%)"
        )
        assert tokens["--test--10-hsl"] == (
            "color-mix(in oklch, hsl(200 20% 95%), var(--base-white) 10%)"
        )

    def test_mix_percentage_capped(self):
        assert [mix_percentage(n) for n in range(1, 7)] == [5, 10, 15, 20, 25, 30]
        assert mix_percentage(19) == 95
        assert mix_percentage(40) == 95

    def test_token_count(self, test_samples):
        """Per mode: two primary aliases, ten shades, ten tints."""
        assert len(create_recursive_colors(test_samples)) == 44


class TestDarkMode:
    """Tests for the light/dark role swap."""

    def test_backgrounds_are_tints(self, test_samples):
        tokens = create_recursive_colors(test_samples)
        for i in range(1, 11):
            assert tokens[f"--test-{i}-hsl{DARK}"] == tokens[f"--test--{i}-hsl"]

    def test_foregrounds_are_shades(self, test_samples):
        tokens = create_recursive_colors(test_samples)
        for i in range(1, 11):
            assert tokens[f"--test--{i}-hsl{DARK}"] == tokens[f"--test-{i}-hsl"]


class TestSampleCount:
    """Tests for ramps of the wrong length."""

    def test_short_ramp_fails(self):
        with pytest.raises(IndexError):
            create_recursive_colors(make_samples(count=12))

    def test_empty_ramp_fails(self):
        with pytest.raises(IndexError):
            create_recursive_colors({})

    def test_long_ramp_fails(self):
        with pytest.raises(ValueError):
            create_recursive_colors(make_samples(count=14))


class TestResolvedMix:
    """Tests for eager OKLCH resolution of the extrapolated steps."""

    def test_no_color_mix_left(self, test_samples):
        tokens = create_recursive_colors(test_samples, resolve_mix=True)
        for value in tokens.values():
            assert "color-mix" not in value
            parse_hsl(value)

    def test_anchors_unchanged(self, test_samples):
        deferred = create_recursive_colors(test_samples)
        resolved = create_recursive_colors(test_samples, resolve_mix=True)
        for i in range(1, 5):
            assert deferred[f"--test-{i}-hsl"] == resolved[f"--test-{i}-hsl"]
        for i in range(1, 9):
            assert deferred[f"--test--{i}-hsl"] == resolved[f"--test--{i}-hsl"]

    def test_shades_get_darker(self, test_samples):
        tokens = create_recursive_colors(test_samples, resolve_mix=True)
        lightness = [parse_hsl(tokens[f"--test-{i}-hsl"]).l for i in range(4, 11)]
        assert lightness == sorted(lightness, reverse=True)
        assert lightness[-1] < lightness[0]


class TestDeterminism:
    def test_same_input_same_output(self, test_samples):
        assert create_recursive_colors(test_samples) == create_recursive_colors(
            dict(test_samples)
        )


class TestContrastColors:
    """Tests for the fixed black/white ramps."""

    def test_ends(self):
        c = contrast_colors()
        assert c["--color-black-0"] == "hsl(0 0% 0%)"
        assert c["--color-white-0"] == "hsl(0 0% 100%)"
        assert c["--color-black-10"] == "hsl(0 0% 95%)"
        assert c["--color-white-10"] == "hsl(0 0% 50%)"

    def test_dark_swaps(self):
        c = contrast_colors()
        assert c[f"--color-black-0{DARK}"] == c["--color-white-0"]
        assert c[f"--color-white-0{DARK}"] == c["--color-black-0"]
        assert c[f"--color-black-10{DARK}"] == "hsl(0 0% 5%)"
        assert c[f"--color-white-10{DARK}"] == "hsl(0 0% 50%)"

    def test_full_ramp(self):
        c = contrast_colors()
        assert [c[f"--color-white-{i}"] for i in range(11)] == [
            f"hsl(0 0% {100 - 5 * i}%)" for i in range(11)
        ]
        assert [c[f"--color-white-{i}{DARK}"] for i in range(11)] == [
            f"hsl(0 0% {5 * i}%)" for i in range(11)
        ]
        assert len(c) == 44


class TestBuildColorTokens:
    """Tests for the merged color table."""

    def test_shipped_table(self, samples_csv):
        table = load_hue_table(samples_csv)
        tokens = build_color_tokens(table)
        assert len(tokens) == len(BASE_COLORS) + 44 * len(table) + 44
        assert tokens["--base-white"] == "hsl(0 0% 100%)"
        assert tokens["--base-black"] == "hsl(0 0% 0%)"
        for hue in table:
            assert tokens[f"--{hue}-0-hsl"] == tokens[f"--{hue}-hsl"]

    def test_duplicate_hue_rejected(self, test_samples):
        with pytest.raises(ValueError, match="Duplicate"):
            build_color_tokens({"a": test_samples, "b": test_samples})
