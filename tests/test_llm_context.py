import unittest

from core.contract import ConsumptionInput
from core.llm_context import GLOSSARY, glossary_text, scenarios_context, system_prompt
from core.regulatory import classify
from core.scenarios import generate_scenarios


class TestLLMContext(unittest.TestCase):
    def setUp(self):
        c = ConsumptionInput(postal_code="01310-100", monthly_consumption_kwh=350.0)
        self.scenarios = generate_scenarios(c)
        self.classification = classify(self.scenarios[1].sizing.power_kwp, "shared-generation")

    def test_one_line_per_scenario_then_law(self):
        txt = scenarios_context(self.scenarios, self.classification)
        lines = txt.splitlines()
        self.assertEqual("CENÁRIOS:", lines[0])
        self.assertTrue(lines[1].startswith("Conservative: PR 1,14"))
        self.assertTrue(lines[2].startswith("Realistic [recomendado]: PR 1,30"))
        self.assertTrue(lines[3].startswith("Optimistic: PR 1,45"))
        self.assertEqual("LEI 14.300/2022:", lines[4])
        self.assertIn("Microgeração", lines[5])
        self.assertIn("Geração Compartilhada", lines[6])
        self.assertEqual(6, sum(1 for ln in lines if ln.startswith("- ")))

    def test_realistic_line_carries_results(self):
        line = scenarios_context(self.scenarios, self.classification).splitlines()[2]
        self.assertIn("1,79 kWp", line)
        self.assertIn("4 módulos", line)
        self.assertIn("R$ 8.055,00", line)
        self.assertIn("payback 2,15 anos", line)

    def test_pure(self):
        a = scenarios_context(self.scenarios, self.classification)
        b = scenarios_context(self.scenarios, self.classification)
        self.assertEqual(a, b)

    def test_system_prompt_uses_config(self):
        txt = system_prompt()
        self.assertIn("Conservative (1,14), Realistic (1,30), Optimistic (1,45)", txt)
        self.assertIn("R$ 0,89/kWh", txt)
        self.assertIn("até 75 kWp", txt)
        self.assertIn("60 meses", txt)
        self.assertIn("0,5% ao ano", txt)

    def test_glossary(self):
        self.assertEqual(len(GLOSSARY), len(glossary_text().splitlines()))
        self.assertEqual(["- kWp: " + GLOSSARY["kWp"]], glossary_text(["kWp", "desconhecido"]).splitlines())


if __name__ == "__main__":
    unittest.main()
