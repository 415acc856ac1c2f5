import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from pocket.errors import ApiError, DecodeError, TransportError  # noqa: E402
from pocket.response import Failure, Success, classify  # noqa: E402
from pocket.transport import RawResponse  # noqa: E402


class ClassifyTests(unittest.TestCase):
    def test_ok_json_is_success(self):
        result = classify(RawResponse(200, {}, '{"status": 1, "list": {}}'))
        self.assertIsInstance(result, Success)
        self.assertTrue(result.ok)
        self.assertEqual(result.value, {"status": 1, "list": {}})

    def test_any_2xx_is_success(self):
        result = classify(RawResponse(204, {}, "[]"))
        self.assertEqual(result, Success([]))

    def test_error_headers_are_extracted(self):
        response = RawResponse(
            403,
            {"X-Error-Code": "158", "X-Error": "invalid consumer key"},
            "403 Forbidden",
        )
        result = classify(response)
        self.assertIsInstance(result, Failure)
        self.assertFalse(result.ok)
        error = result.error
        self.assertIsInstance(error, ApiError)
        self.assertEqual(error.status_code, 403)
        self.assertEqual(error.code, 158)
        self.assertEqual(error.message, "invalid consumer key")
        self.assertEqual(error.body, "403 Forbidden")

    def test_error_headers_case_insensitive(self):
        response = RawResponse(400, {"x-error-code": "138", "x-error": "Missing consumer key."}, "")
        error = classify(response).error
        self.assertEqual(error.code, 138)
        self.assertEqual(error.message, "Missing consumer key.")

    def test_missing_error_headers_fall_back(self):
        error = classify(RawResponse(503, {}, "<html>down</html>")).error
        self.assertIsInstance(error, ApiError)
        self.assertIsNone(error.code)
        self.assertEqual(error.message, "Unknown error")
        self.assertEqual(error.body, "<html>down</html>")

    def test_non_numeric_error_code(self):
        error = classify(RawResponse(400, {"X-Error-Code": "abc"}, "")).error
        self.assertIsNone(error.code)

    def test_error_body_is_not_parsed(self):
        error = classify(RawResponse(401, {}, '{"message": "ignored"}')).error
        self.assertEqual(error.message, "Unknown error")

    def test_malformed_json_is_decode_error(self):
        result = classify(RawResponse(200, {}, "not json"))
        self.assertIsInstance(result, Failure)
        self.assertIsInstance(result.error, DecodeError)
        self.assertEqual(result.error.body, "not json")

    def test_empty_body_is_decode_error(self):
        result = classify(RawResponse(200, {}, ""))
        self.assertIsInstance(result.error, DecodeError)

    def test_redirect_is_failure(self):
        self.assertIsInstance(classify(RawResponse(302, {}, "")).error, ApiError)


class ResultTests(unittest.TestCase):
    def test_success_unwrap(self):
        self.assertEqual(Success({"a": 1}).unwrap(), {"a": 1})

    def test_failure_unwrap_raises_error_value(self):
        error = ApiError(403, code=158, message="invalid consumer key")
        with self.assertRaises(ApiError) as ctx:
            Failure(error).unwrap()
        self.assertIs(ctx.exception, error)

    def test_failure_unwrap_transport_error(self):
        error = TransportError("timed out")
        with self.assertRaises(TransportError):
            Failure(error).unwrap()
        self.assertIsNone(error.status_code)


if __name__ == "__main__":
    unittest.main()
