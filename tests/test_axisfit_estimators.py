from __future__ import annotations

import unittest

import numpy as np

from axisfit import Field, Range, Scalar, resolve_title
from axisfit.estimators import (
    count_ticks,
    is_in_millions,
    is_log,
    max_category_width,
    max_tick_width,
    skipping_tick_values,
)
from axisfit.scales import format_tick, generate_nice_ticks, sample_divisions
from axisfit.settings import AxisLayoutSettings


class TitleTests(unittest.TestCase):
    def test_labels_join_in_encounter_order(self) -> None:
        fields = [Field(name="a", label="Alpha"), Field(name="b", label="Beta"), Field(name="c", label="Alpha")]
        self.assertEqual(resolve_title(fields), "Alpha, Beta")

    def test_original_labels_preferred_when_fewer(self) -> None:
        fields = [
            Field(name="sales", label="Sales"),
            Field(name="mean_sales", label="Mean(Sales)", original_label_text="Sales"),
        ]
        self.assertEqual(resolve_title(fields), "Sales")

    def test_original_labels_ignored_when_not_fewer(self) -> None:
        fields = [Field(name="m", label="Mean(Sales)", original_label_text="Sales")]
        self.assertEqual(resolve_title(fields), "Mean(Sales)")

    def test_synthetic_and_quoted_fields_are_dropped(self) -> None:
        fields = [Field(name="#count", label="Count", synthetic=True), Field(name="'const'", label="const")]
        self.assertIsNone(resolve_title(fields))

    def test_user_title_wins(self) -> None:
        fields = [Field(name="a", label="Alpha")]
        self.assertEqual(resolve_title(fields, "Custom"), "Custom")
        self.assertIsNone(resolve_title(fields, ""))

    def test_custom_separator(self) -> None:
        fields = [Field(name="a", label="A"), Field(name="b", label="B")]
        self.assertEqual(resolve_title(fields, separator=" / "), "A / B")


class DetectorTests(unittest.TestCase):
    def test_millions_threshold_is_exclusive(self) -> None:
        self.assertFalse(is_in_millions([Field(name="v", min=0.0, max=2e6)], categorical=False))
        self.assertTrue(is_in_millions([Field(name="v", min=0.0, max=2e6 + 1)], categorical=False))

    def test_millions_ignores_dates_and_unknown_ranges(self) -> None:
        fields = [Field(name="when", min=0.0, max=1.7e9, is_date=True), Field(name="empty")]
        self.assertFalse(is_in_millions(fields, categorical=False))

    def test_millions_any_field_qualifies(self) -> None:
        fields = [Field(name="small", min=0.0, max=10.0), Field(name="big", min=-5e6, max=5e6)]
        self.assertTrue(is_in_millions(fields, categorical=False))

    def test_millions_false_for_categorical(self) -> None:
        self.assertFalse(is_in_millions([Field(name="v", min=0.0, max=3.5e6)], categorical=True))

    def test_is_log(self) -> None:
        self.assertFalse(is_log([]))
        self.assertTrue(is_log([Field(name="v", transform_kind="log")]))
        self.assertFalse(is_log([Field(name="v", transform_kind="root")]))


class TickCountTests(unittest.TestCase):
    def test_numeric_axes_assume_ten_ticks(self) -> None:
        self.assertEqual(count_ticks([Field(name="v", categories=(1, 2, 3))], categorical=False), 10)

    def test_categorical_counts_sum_over_fields(self) -> None:
        fields = [Field(name="a", categories=("x", "y")), Field(name="b", categories=("p", "q", "r"))]
        self.assertEqual(count_ticks(fields, categorical=True), 5)

    def test_categorical_without_fields_counts_one(self) -> None:
        self.assertEqual(count_ticks([], categorical=True), 1)

    def test_categorical_fields_without_categories_count_one(self) -> None:
        fields = [Field(name="a"), Field(name="b")]
        self.assertEqual(count_ticks(fields, categorical=True), 1)


class WidthTests(unittest.TestCase):
    def test_no_fields_is_zero_width(self) -> None:
        self.assertEqual(max_category_width([], categorical=True), 0)
        self.assertEqual(max_category_width([], categorical=False), 0)

    def test_categorical_width_uses_longest_label(self) -> None:
        field = Field(name="kind", categories=("a", "medium", "xl"))
        self.assertEqual(max_category_width([field], categorical=True), int(6 * 6.5))

    def test_range_values_get_an_extra_character(self) -> None:
        field = Field(name="bucket", categories=(Range(low=0, high=10),))
        # "0…10" plus one
        self.assertEqual(max_category_width([field], categorical=True), int(5 * 6.5))

    def test_numeric_width_reserves_three_characters(self) -> None:
        field = Field(name="v", min=0.0, max=5.0)
        self.assertEqual(max_category_width([field], categorical=False), int(3 * 6.5))

    def test_numeric_width_uses_sample_ticks(self) -> None:
        field = Field(name="v", min=0.0, max=3_500_000.0)
        self.assertEqual(max_category_width([field], categorical=False), int(7 * 6.5))

    def test_numeric_width_for_field_without_range(self) -> None:
        self.assertEqual(max_category_width([Field(name="v")], categorical=False), int(3 * 6.5))

    def test_char_width_comes_from_settings(self) -> None:
        field = Field(name="kind", categories=("abcd",))
        settings = AxisLayoutSettings(char_width_px=10.0)
        self.assertEqual(max_category_width([field], categorical=True, settings=settings), 40)

    def test_tick_width_uses_plain_text(self) -> None:
        ticks = (Scalar("abc"), Range(low=1, high=2))
        self.assertEqual(max_tick_width(ticks), int(4 * 6.5))
        self.assertEqual(max_tick_width(()), 6)


class TickSkipperTests(unittest.TestCase):
    def test_numeric_axes_never_skip(self) -> None:
        field = Field(name="v", categories=tuple(range(100)))
        self.assertIsNone(skipping_tick_values([field], False, 10.0, 100))

    def test_roomy_axis_shows_everything(self) -> None:
        field = Field(name="v", categories=tuple("abcdef"))
        self.assertIsNone(skipping_tick_values([field], True, 600.0, 6))

    def test_skip_frequency_rounds_half_up(self) -> None:
        field = Field(name="v", categories=tuple(f"k{i}" for i in range(10)))
        # 20 / (80 / 10) = 2.5 -> 3
        kept = skipping_tick_values([field], True, 80.0, 10)
        self.assertEqual(kept, (Scalar("k0"), Scalar("k3"), Scalar("k6"), Scalar("k9")))

    def test_skipping_walks_across_fields(self) -> None:
        a = Field(name="a", categories=("a0", "a1", "a2"))
        b = Field(name="b", categories=("b0", "b1", "b2"))
        kept = skipping_tick_values([a, b], True, 60.0, 6)
        self.assertEqual(kept, (Scalar("a0"), Scalar("a2"), Scalar("b1")))

    def test_skipping_is_deterministic(self) -> None:
        field = Field(name="v", categories=tuple(f"k{i}" for i in range(50)))
        first = skipping_tick_values([field], True, 200.0, 50)
        second = skipping_tick_values([field], True, 200.0, 50)
        self.assertEqual(first, second)
        assert first is not None
        self.assertLess(len(first), 50)

    def test_zero_space_keeps_first_category(self) -> None:
        field = Field(name="v", categories=("a", "b", "c"))
        self.assertEqual(skipping_tick_values([field], True, 0.0, 3), (Scalar("a"),))


class ScaleTests(unittest.TestCase):
    def test_sample_divisions_cover_field_range(self) -> None:
        ticks = sample_divisions(Field(name="v", min=0.0, max=3_500_000.0), 5)
        self.assertTrue(np.allclose(ticks, [0.0, 1e6, 2e6, 3e6, 4e6]))

    def test_sample_divisions_without_range_is_empty(self) -> None:
        self.assertEqual(sample_divisions(Field(name="v")).size, 0)

    def test_sample_divisions_padding_widens_range(self) -> None:
        field = Field(name="v", min=0.0, max=10.0)
        self.assertLess(float(sample_divisions(field, 5, pad_ratio=0.5)[0]), 0.0)

    def test_tick_formatting_trims_drift_and_trailing_zeros(self) -> None:
        self.assertEqual(format_tick(0.30000000000000004), "0.3")
        self.assertEqual(format_tick(40.0), "40")
        self.assertEqual(format_tick(-0.0000001), "-1.0000e-07")

    def test_nice_ticks_snap_near_zero(self) -> None:
        ticks = generate_nice_ticks(-1.0, 1.0, 5)
        self.assertIn(0.0, ticks.tolist())

    def test_nice_ticks_reject_bad_target(self) -> None:
        with self.assertRaises(ValueError):
            generate_nice_ticks(0.0, 1.0, 0)


if __name__ == "__main__":
    unittest.main()
