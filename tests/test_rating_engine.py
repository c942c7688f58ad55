import unittest

from skirmish.domain.rating import (
    MAX_KILLS,
    MAX_ROUNDS,
    ValidationFailure,
    rating_delta,
    round_rating,
    validate,
)


class RatingDeltaTests(unittest.TestCase):
    def test_winner_and_loser_of_reference_match(self):
        self.assertEqual(rating_delta(10, 6, 2), 12.5)
        self.assertEqual(rating_delta(4, 2, 6), -5.0)

    def test_no_rounds_means_no_change(self):
        self.assertEqual(rating_delta(15, 0, 0), 0)

    def test_even_split_means_no_change(self):
        for kills, rounds in ((0, 1), (7, 5), (60, 30)):
            with self.subTest(kills=kills, rounds=rounds):
                self.assertEqual(rating_delta(kills, rounds, rounds), 0)

    def test_zero_kills_means_no_change(self):
        self.assertEqual(rating_delta(0, 13, 2), 0)
        self.assertEqual(rating_delta(0, 2, 13), 0)

    def test_linear_in_kills(self):
        base = rating_delta(1, 12, 4)
        self.assertEqual(base, 0.63)
        self.assertEqual(rating_delta(2, 12, 4), 1.25)
        self.assertEqual(rating_delta(8, 12, 4), 5.0)
        self.assertAlmostEqual(rating_delta(8, 12, 4), 8 * 0.625)

    def test_sign_follows_round_margin(self):
        self.assertGreater(rating_delta(5, 7, 3), 0)
        self.assertLess(rating_delta(5, 3, 7), 0)

    def test_half_cent_rounds_away_from_zero(self):
        # 20 * (1/40) * (10/40) is exactly 0.125
        self.assertEqual(rating_delta(1, 25, 15), 0.13)
        self.assertEqual(rating_delta(1, 15, 25), -0.13)

    def test_round_rating_uses_binary_value(self):
        # 1.005 is stored slightly below the half cent
        self.assertEqual(round_rating(1.005), 1.0)
        self.assertEqual(round_rating(2.675), 2.67)
        self.assertEqual(round_rating(0.375), 0.38)


class ValidateTests(unittest.TestCase):
    def test_accepts_empty_match(self):
        self.assertTrue(validate(0, 0, 0).is_valid)

    def test_accepts_exact_limits(self):
        result = validate(MAX_KILLS, MAX_ROUNDS // 2, MAX_ROUNDS // 2)
        self.assertTrue(result.is_valid)
        self.assertIsNone(result.reason)

    def test_rejects_negative_values(self):
        for args in ((-1, 0, 0), (0, -1, 0), (0, 0, -1)):
            with self.subTest(args=args):
                result = validate(*args)
                self.assertFalse(result.is_valid)
                self.assertEqual(result.failure, ValidationFailure.NEGATIVE_VALUE)
                self.assertEqual(result.reason, "negative value")

    def test_rejects_too_many_rounds(self):
        result = validate(0, 31, 30)
        self.assertEqual(result.failure, ValidationFailure.TOO_MANY_ROUNDS)
        self.assertEqual(result.reason, "total rounds exceed maximum")

    def test_rejects_too_many_kills(self):
        result = validate(61, 0, 0)
        self.assertEqual(result.failure, ValidationFailure.TOO_MANY_KILLS)
        self.assertEqual(result.reason, "kills exceed maximum")

    def test_first_failing_rule_wins(self):
        self.assertEqual(validate(-1, 61, 0).failure, ValidationFailure.NEGATIVE_VALUE)
        self.assertEqual(validate(99, 40, 40).failure, ValidationFailure.TOO_MANY_ROUNDS)
