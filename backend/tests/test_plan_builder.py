"""
Unit tests for the plan builder.
Run: python -m pytest backend/tests/test_plan_builder.py -v
"""
import unittest

from app.engine import build_plan
from app.engine.plan_builder import get_day_numbers, get_day_templates, get_week_phases


def phases(periodization, weeks):
    return [(wp.phase, wp.intensity_modifier) for wp in get_week_phases(periodization, weeks)]


class TestDayTemplates(unittest.TestCase):
    def test_ppl_five_sessions(self):
        labels = [t.label for t in get_day_templates("push_pull_legs", 5)]
        self.assertEqual(labels, ["Push A", "Pull A", "Legs A", "Push B", "Pull B"])

    def test_upper_lower_single_session(self):
        self.assertEqual([t.label for t in get_day_templates("upper_lower", 1)], ["Upper Body"])

    def test_unknown_split_falls_back_to_full_body(self):
        self.assertEqual(get_day_templates("crossfit", 3), get_day_templates("full_body", 3))
        self.assertEqual(get_day_templates("custom", 2), get_day_templates("full_body", 2))

    def test_more_sessions_than_authored(self):
        """Full body only authors four days; asking for seven gives four."""
        self.assertEqual(len(get_day_templates("full_body", 7)), 4)


class TestWeekPhases(unittest.TestCase):
    def test_linear_eight_weeks(self):
        self.assertEqual(phases("linear", 8), [
            ("Accumulation", "moderate"),
            ("Accumulation", "moderate"),
            ("Accumulation", "moderate"),
            ("Intensification", "high"),
            ("Intensification", "high"),
            ("Intensification", "high"),
            ("Peak", "very high"),
            ("Deload", "low"),
        ])

    def test_short_program_has_no_deload(self):
        self.assertEqual(phases("linear", 4)[-1], ("Peak", "very high"))
        self.assertNotIn(("Deload", "low"), phases("block", 5))

    def test_reverse_linear(self):
        self.assertEqual([p for p, _ in phases("reverse_linear", 4)],
                         ["Strength", "Hypertrophy", "Hypertrophy", "Endurance"])

    def test_undulating_cycles(self):
        self.assertEqual([m for _, m in phases("undulating", 4)],
                         ["moderate", "high", "moderate-high", "moderate"])

    def test_block_nine_weeks(self):
        self.assertEqual([p for p, _ in phases("block", 9)], [
            "Hypertrophy", "Hypertrophy", "Hypertrophy",
            "Strength", "Strength", "Strength",
            "Power / Peaking", "Power / Peaking", "Deload",
        ])

    def test_block_minimum_size_two(self):
        self.assertEqual([p for p, _ in phases("block", 4)],
                         ["Hypertrophy", "Hypertrophy", "Strength", "Strength"])

    def test_unknown_periodization(self):
        self.assertEqual(set(phases("wave", 3)), {("General Training", "moderate")})

    def test_deload_is_only_ever_the_last_week(self):
        for style in ("linear", "reverse_linear", "undulating", "block", "none"):
            for weeks in range(1, 17):
                got = phases(style, weeks)
                deloads = [i for i, (p, _) in enumerate(got, start=1) if p == "Deload"]
                self.assertEqual(deloads, [weeks] if weeks >= 6 else [], (style, weeks))


class TestDayNumbers(unittest.TestCase):
    def test_default_spread(self):
        self.assertEqual(get_day_numbers(3), [1, 3, 5])

    def test_preferred_days_used_verbatim(self):
        self.assertEqual(get_day_numbers(3, [6, 2, 4]), [6, 2, 4])

    def test_preferred_days_wrong_length_ignored(self):
        self.assertEqual(get_day_numbers(3, [2, 4]), [1, 3, 5])


class TestBuildPlan(unittest.TestCase):
    def test_slot_grid(self):
        slots = build_plan("push_pull_legs", "linear", 8, 5)
        self.assertEqual(len(slots), 40)
        first = slots[0]
        self.assertEqual((first.week_number, first.day_of_week, first.label), (1, 1, "Push A"))
        self.assertEqual(first.slot_id, "w1d1")
        self.assertEqual([s.day_of_week for s in slots[:5]], [1, 2, 3, 5, 6])
        self.assertTrue(all(s.phase == "Deload" for s in slots if s.week_number == 8))

    def test_slot_ids_unique(self):
        slots = build_plan("body_part", "block", 12, 6)
        self.assertEqual(len({s.slot_id for s in slots}), len(slots))

    def test_deterministic(self):
        self.assertEqual(build_plan("upper_lower", "undulating", 6, 4, [1, 2, 4, 5]),
                         build_plan("upper_lower", "undulating", 6, 4, [1, 2, 4, 5]))

    def test_sessions_clamped(self):
        self.assertEqual(len(build_plan("full_body", "none", 1, 0)), 1)
        self.assertEqual(len(build_plan("movement_pattern", "none", 1, 10)), 6)

    def test_zero_weeks(self):
        self.assertEqual(build_plan("full_body", "linear", 0, 3), [])


if __name__ == "__main__":
    unittest.main()
