import importlib
import unittest


class TestSmokeImports(unittest.TestCase):
    def test_import_core_and_ui_modules(self):
        for name in (
            "core",
            "core.config",
            "core.scenarios",
            "core.llm_context",
            "ui.consumption_form",
            "ui.scenarios_view",
            "ui.financing_view",
            "ui.regulatory_view",
        ):
            self.assertIsNotNone(importlib.import_module(name))

    def test_public_api(self):
        core = importlib.import_module("core")
        for name in core.__all__:
            self.assertTrue(hasattr(core, name), name)


if __name__ == "__main__":
    unittest.main()
