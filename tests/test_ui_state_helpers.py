import unittest

from ui.state_helpers import (
    AdvisorCtx,
    build_inputs_fingerprint,
    ctx_get,
    ensure_dict,
    is_result_stale,
    merge_defaults,
    save_result_fingerprint,
)


class Ctx:
    pass


class TestUIStateHelpers(unittest.TestCase):
    def test_ensure_dict(self):
        ctx = Ctx()
        d = ensure_dict(ctx, "foo", lambda: {"a": 1})
        self.assertEqual({"a": 1}, d)
        self.assertIs(d, ctx.foo)

    def test_merge_defaults(self):
        dst = {"a": 10}
        out = merge_defaults(dst, {"a": 1, "b": 2})
        self.assertEqual({"a": 10, "b": 2}, out)

    def test_ctx_get_creates_and_reuses(self):
        state = {}
        ctx = ctx_get(state)
        self.assertIsInstance(ctx, AdvisorCtx)
        self.assertIs(ctx, ctx_get(state))

    def test_ctx_get_fills_missing_keys(self):
        old = AdvisorCtx()
        old.consumption = {"monthly_kwh": 500.0}
        old.financing = None
        state = {"advisor_ctx": old}

        ctx = ctx_get(state)
        self.assertEqual(500.0, ctx.consumption["monthly_kwh"])
        self.assertEqual("single", ctx.consumption["phase"])
        self.assertEqual("cash", ctx.financing["modality"])

    def test_fingerprint_detects_stale(self):
        ctx = AdvisorCtx()
        ctx.consumption["postal_code"] = "01310-100"

        fp = save_result_fingerprint(ctx)
        self.assertEqual(fp, build_inputs_fingerprint(ctx))
        self.assertFalse(is_result_stale(ctx))

        # cambiar la modalidad de pago no invalida los escenarios
        ctx.financing["modality"] = "financed"
        self.assertFalse(is_result_stale(ctx))

        ctx.consumption["monthly_kwh"] = 420.0
        self.assertTrue(is_result_stale(ctx))

    def test_never_saved_is_not_stale(self):
        self.assertFalse(is_result_stale(AdvisorCtx()))


if __name__ == "__main__":
    unittest.main()
