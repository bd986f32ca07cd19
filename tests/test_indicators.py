import unittest

from klinecamp.indicators.basic import EMA, SMA


class TestIndicators(unittest.TestCase):
    def test_sma(self):
        sma = SMA(3)
        vals = [1, 2, 3, 4]
        outs = [sma.update(x) for x in vals]
        self.assertIsNone(outs[0])
        self.assertIsNone(outs[1])
        self.assertAlmostEqual(outs[2], 2.0)
        self.assertAlmostEqual(outs[3], 3.0)

    def test_ema_seeds_with_first_value(self):
        ema = EMA(3)
        v1 = ema.update(1)
        v2 = ema.update(2)
        self.assertEqual(v1, 1)
        # k = 0.5 for period 3
        self.assertAlmostEqual(v2, 1.5)

    def test_ema_constant_series_is_constant(self):
        for period in (1, 9, 12, 26):
            for value in EMA.series([5.0] * 40, period):
                self.assertAlmostEqual(value, 5.0)

    def test_invalid_period(self):
        with self.assertRaises(ValueError):
            SMA(0)
        with self.assertRaises(ValueError):
            EMA(0)


if __name__ == '__main__':
    unittest.main()
