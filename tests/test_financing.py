import unittest

from core.config import SolarConfig
from core.contract import PaymentModality
from core.errors import InvalidConfiguration, InvalidFinancingParameters, UnknownModality, UnknownPaymentModality
from core.financing import annuity_installment, monthly_rate_from_annual, quote, quote_all


def _reference_installment(principal: float, annual: float, n: int) -> float:
    i = (1 + annual) ** (1 / 12) - 1
    return principal * i * (1 + i) ** n / ((1 + i) ** n - 1)


class TestFinancing(unittest.TestCase):
    def test_cash(self):
        opt = quote(10000, 12000, "cash")
        self.assertEqual(PaymentModality.CASH, opt.modality)
        self.assertEqual(10000.0, opt.total_value)
        self.assertIsNone(opt.monthly_payment)

    def test_financed_reference_case(self):
        opt = quote(10000, 12000, PaymentModality.FINANCED, down_payment=2000, installments=60, annual_rate=0.12)
        self.assertAlmostEqual(0.009489, opt.monthly_rate, places=6)
        self.assertLessEqual(abs(opt.installment_value - _reference_installment(8000, 0.12, 60)), 0.01)
        self.assertEqual(60, opt.installment_count)
        self.assertAlmostEqual(2000 + opt.installment_value * 60, opt.total_value, places=2)
        self.assertEqual(opt.installment_value, opt.monthly_payment)
        self.assertGreater(opt.total_value, 10000)

    def test_financed_defaults(self):
        opt = quote(10000, 12000, "financed")
        self.assertEqual(2000.0, opt.down_payment)
        self.assertEqual(60, opt.installment_count)
        self.assertEqual(0.12, opt.annual_rate)

    def test_zero_rate_is_straight_division(self):
        opt = quote(10000, 12000, "financed", down_payment=1000, installments=36, annual_rate=0.0)
        self.assertEqual(0.0, opt.monthly_rate)
        self.assertAlmostEqual(250.0, opt.installment_value, places=2)
        self.assertAlmostEqual(10000.0, opt.total_value, places=2)
        self.assertEqual(100.0, annuity_installment(1200, 0.0, 12))

    def test_single_installment(self):
        r = monthly_rate_from_annual(0.12)
        self.assertAlmostEqual(8000 * (1 + r), annuity_installment(8000, r, 1), places=6)

    def test_subscription_and_shared_generation(self):
        sub = quote(10000, 12000, "subscription")
        gc = quote(10000, 12000, "shared-generation")
        self.assertEqual(850.0, sub.monthly_fee)
        self.assertEqual(800.0, gc.monthly_fee)
        self.assertEqual(1000.0, sub.monthly_savings)
        self.assertEqual(800.0, gc.monthly_payment)

    def test_shares_follow_config(self):
        cfg = SolarConfig(subscription_share=0.9)
        self.assertEqual(900.0, quote(10000, 12000, "subscription", config=cfg).monthly_fee)

    def test_invalid_installments(self):
        for n in (0, -3, 2.5, True, "60"):
            with self.assertRaises(InvalidFinancingParameters):
                quote(10000, 12000, "financed", down_payment=0, installments=n)
        with self.assertRaises(InvalidFinancingParameters):
            annuity_installment(1000, 0.01, 0)

    def test_huge_installment_count(self):
        with self.assertRaises(InvalidFinancingParameters):
            quote(10000, 12000, "financed", down_payment=0, installments=10**6)
        with self.assertRaises(InvalidFinancingParameters):
            annuity_installment(8000, 0.009489, 10**6)

    def test_invalid_down_payment(self):
        with self.assertRaises(InvalidFinancingParameters):
            quote(10000, 12000, "financed", down_payment=-1)
        with self.assertRaises(InvalidFinancingParameters):
            quote(10000, 12000, "financed", down_payment=10000.01)

    def test_full_down_payment_leaves_nothing_to_finance(self):
        opt = quote(10000, 12000, "financed", down_payment=10000, installments=12)
        self.assertEqual(0.0, opt.installment_value)
        self.assertEqual(10000.0, opt.total_value)

    def test_unknown_modality(self):
        with self.assertRaises(UnknownModality):
            quote(10000, 12000, "leasing")
        with self.assertRaises(UnknownPaymentModality):
            quote(10000, 12000, "leasing")
        with self.assertRaises(InvalidFinancingParameters):
            quote(10000, 12000, "leasing")
        with self.assertRaises(InvalidConfiguration):
            quote(10000, 12000, "leasing")

    def test_quote_all_in_modality_order(self):
        opts = quote_all(10000, 12000)
        self.assertEqual(list(PaymentModality), [o.modality for o in opts])


if __name__ == "__main__":
    unittest.main()
