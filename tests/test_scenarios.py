import unittest

from core.config import SolarConfig
from core.contract import ConsumptionInput, ScenarioName
from core.errors import InvalidConsumption
from core.financial import analyze
from core.scenarios import effective_tariff, find_scenario, generate_scenarios, recommended_scenario
from core.sizing import size


class TestScenarios(unittest.TestCase):
    def setUp(self):
        self.c = ConsumptionInput(postal_code="01310-100", monthly_consumption_kwh=350.0)

    def test_three_scenarios_in_preset_order(self):
        out = generate_scenarios(self.c)
        self.assertEqual(["Conservative", "Realistic", "Optimistic"], [s.name for s in out])
        self.assertEqual([1.14, 1.30, 1.45], [s.performance_ratio for s in out])

    def test_power_decreases_across_scenarios(self):
        out = generate_scenarios(self.c)
        self.assertAlmostEqual(2.05, out[0].sizing.power_kwp, places=2)
        self.assertAlmostEqual(1.79, out[1].sizing.power_kwp, places=2)
        self.assertAlmostEqual(1.61, out[2].sizing.power_kwp, places=2)
        self.assertEqual([4, 4, 3], [s.sizing.module_count for s in out])

    def test_each_scenario_is_the_pipeline(self):
        out = generate_scenarios(self.c, 5000)
        for s in out:
            sizing = size(self.c, s.performance_ratio)
            self.assertEqual(sizing, s.sizing)
            self.assertEqual(analyze(sizing, 5000, 0.89), s.analysis)

    def test_consumer_tariff_overrides_default(self):
        c = ConsumptionInput(postal_code="01310-100", monthly_consumption_kwh=350.0, tariff_rate=1.10)
        self.assertEqual(1.10, effective_tariff(c))
        self.assertEqual(0.89, effective_tariff(self.c))
        real = find_scenario(generate_scenarios(c), "Realistic")
        self.assertAlmostEqual(350.0 * 1.10 * 12, real.analysis.annual_savings, places=2)

    def test_realistic_is_recommended(self):
        out = generate_scenarios(self.c)
        rec = recommended_scenario(out)
        self.assertEqual(ScenarioName.REALISTIC.value, rec.name)
        self.assertEqual([False, True, False], [s.is_recommended for s in out])

    def test_custom_presets_keep_order(self):
        cfg = SolarConfig(scenario_presets=(("B", 1.5), ("A", 1.0)))
        out = generate_scenarios(self.c, config=cfg)
        self.assertEqual(["B", "A"], [s.name for s in out])
        self.assertIsNone(recommended_scenario(out))

    def test_invalid_consumption_rejected_before_sizing(self):
        with self.assertRaises(InvalidConsumption):
            generate_scenarios(ConsumptionInput(postal_code="x", monthly_consumption_kwh=0))

    def test_deterministic(self):
        self.assertEqual(generate_scenarios(self.c), generate_scenarios(self.c))


if __name__ == "__main__":
    unittest.main()
