import unittest
from fractions import Fraction
from math import floor

from numberlines.constants import DENOMINATORS, MAX_TICKS, MIN_TICKS, RELAXED_FACTOR
from numberlines.ticks import (
    choose_denominator,
    count_ticks,
    format_fraction,
    fraction_ticks,
    ticks_for_range,
)

RANGES = [
    (0, 1),
    (0, 3),
    (-1.5, 0.25),
    (0, 0.01),
    (0.001, 0.002),
    (2.2, 2.9),
    (-10, 10),
    (-100, 100),
    (0, 0.3),
    (-0.6, -0.1),
    (-10.6, 10.6),
]


class ChooseDenominatorTestCase(unittest.TestCase):

    def test_tick_count_within_window_or_best_fallback(self):
        ceiling = floor(MAX_TICKS * RELAXED_FACTOR)

        for r in RANGES:
            with self.subTest(r=r):
                d = choose_denominator(r)
                counts = [(count_ticks(r, candidate), candidate) for candidate in DENOMINATORS]
                in_window = [c for (c, candidate) in counts if MIN_TICKS <= c <= MAX_TICKS]

                if in_window:
                    # the first denominator (in order of preference) that fits the window
                    self.assertEqual(
                        [candidate for (c, candidate) in counts if MIN_TICKS <= c <= MAX_TICKS][0], d)
                    continue

                relaxed = [c for (c, candidate) in counts if 1 <= c <= ceiling]
                if not relaxed:
                    self.assertIsNone(d)
                    continue

                self.assertEqual(max(relaxed), count_ticks(r, d))

    def test_custom_denominators_and_window(self):
        self.assertEqual(10, choose_denominator((0, 1), denominators=(10, 2), min_ticks=2, max_ticks=11))
        self.assertEqual(2, choose_denominator((0, 1), denominators=(2, 10), min_ticks=2, max_ticks=11))

    def test_count_ticks_tolerates_float_noise(self):
        # 0.1 * 3 is not quite 0.3
        self.assertEqual(4, count_ticks((0.1 * 3, 0.6), 10))


class FormatTestCase(unittest.TestCase):

    def test_never_minus_zero(self):
        for d in DENOMINATORS:
            for n in range(-2 * d, 2 * d + 1):
                label = format_fraction(n, d)
                self.assertFalse(label.startswith("-0"), label)
                self.assertNotIn(" 0/", label)

    def test_labels_parse_back(self):
        for d in [3, 4, 12]:
            for n in range(-30, 31):
                label = format_fraction(n, d)
                sign = -1 if label.startswith("-") else 1
                total = sum(Fraction(part) for part in label.lstrip("-").split(" "))
                self.assertEqual(Fraction(n, d), sign * total)

    def test_mixed_numbers(self):
        self.assertEqual("2 1/3", format_fraction(7, 3))
        self.assertEqual("-2 1/3", format_fraction(-7, 3))
        self.assertEqual("-7/3", format_fraction(-7, 3, mixed=False))


class TicksTestCase(unittest.TestCase):

    def test_fraction_ticks_are_ordered_and_inside(self):
        r = (-1.5, 0.25)
        ticks = fraction_ticks(r, 4)
        self.assertEqual(sorted(ticks.values), ticks.values)
        self.assertTrue(all(r[0] <= v <= r[1] for v in ticks.values))
        self.assertEqual(len(ticks.values), len(ticks.labels))

    def test_decimal_fallback(self):
        ticks = ticks_for_range((-100, 100))
        self.assertIsNone(ticks.denominator)
        self.assertIn("0", ticks.labels)
        self.assertEqual(-100, ticks.values[0])
        self.assertEqual(100, ticks.values[-1])

    def test_fractional_detail_line(self):
        ticks = ticks_for_range((0.2, 0.8))
        self.assertIsNotNone(ticks.denominator)
        self.assertTrue(MIN_TICKS <= len(ticks.values) <= MAX_TICKS)


if __name__ == '__main__':
    unittest.main()
