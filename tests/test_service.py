import math
import unittest

from pydantic import ValidationError

from app.vecmath.schema import PairRequest, ReflectRequest
from app.vecmath.service import NonFiniteResultError, UnknownOperationError, evaluate, operation_names


class TestService(unittest.TestCase):
    def test_operation_names(self):
        self.assertEqual(
            set(operation_names()),
            {"add", "subtract", "multiply", "dot", "magnitude", "normalize", "distance", "reflect", "angle", "from_angle"},
        )

    def test_vector_result_from_model(self):
        req = PairRequest(a={"x": 1, "y": 2}, b={"x": 3, "y": 4})
        self.assertEqual(evaluate("add", req), {"result": {"x": 4.0, "y": 6.0}})

    def test_scalar_result_from_mapping(self):
        out = evaluate("dot", {"a": {"x": 1, "y": 2}, "b": {"x": 3, "y": 4}})
        self.assertEqual(out, {"result": 11.0})

    def test_reflect(self):
        req = ReflectRequest(incident={"x": 1, "y": -1}, normal={"x": 0, "y": 1})
        self.assertEqual(evaluate("reflect", req), {"result": {"x": 1.0, "y": 1.0}})

    def test_from_angle_uses_default_magnitude(self):
        out = evaluate("from_angle", {"angle": 0.0})
        self.assertEqual(out, {"result": {"x": 1.0, "y": 0.0}})

    def test_normalize_zero(self):
        out = evaluate("normalize", {"v": {"x": 0, "y": 0}})
        self.assertEqual(out, {"result": {"x": 0.0, "y": 0.0}})

    def test_angle(self):
        out = evaluate("angle", {"v": {"x": 0, "y": 2}})
        self.assertAlmostEqual(out["result"], math.pi / 2, places=12)

    def test_unknown_operation(self):
        with self.assertRaises(UnknownOperationError):
            evaluate("cross", {"a": {"x": 1, "y": 0}, "b": {"x": 0, "y": 1}})
        self.assertTrue(issubclass(UnknownOperationError, KeyError))

    def test_invalid_payload(self):
        with self.assertRaises(ValidationError):
            evaluate("multiply", {"v": {"x": 1, "y": 2}})

    def test_non_finite_result_is_rejected(self):
        with self.assertLogs("app.vecmath.service", level="WARNING"):
            with self.assertRaises(NonFiniteResultError):
                evaluate("multiply", {"v": {"x": 1e308, "y": 0}, "scalar": 10})


if __name__ == "__main__":
    unittest.main()
