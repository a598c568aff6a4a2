import json
import sys
import unittest
from dataclasses import dataclass
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pydantic import BaseModel
from starlette.requests import Request

from jsonresponder.api.envelopes import Envelope, build_response
from jsonresponder.api.responder import Classified, JSONResponder, ValueKind, classify


@dataclass
class Pair:
    n: int
    s: str


class Pet(BaseModel):
    name: str
    age: int


def _request(path: str = "/respond") -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": path,
            "headers": [],
            "query_string": b"",
        }
    )


class ClassifyTests(unittest.TestCase):
    def test_none_is_absent(self):
        self.assertEqual(classify(None), Classified(ValueKind.ABSENT, None))

    def test_envelope_wins(self):
        envelope = build_response(202, "ok")
        classified = classify(envelope)
        self.assertIs(classified.kind, ValueKind.ENVELOPE)
        self.assertIs(classified.value, envelope)

    def test_exception_group_is_aggregate_with_leaves(self):
        first = ValueError("a")
        second = TypeError("b")
        third = OSError("c")
        group = ExceptionGroup("outer", [first, ExceptionGroup("inner", [second]), third])

        classified = classify(group)

        self.assertIs(classified.kind, ValueKind.AGGREGATE_ERROR)
        self.assertEqual(classified.value, (first, second, third))

    def test_base_exception_is_single_error(self):
        self.assertIs(classify(ValueError("x")).kind, ValueKind.SINGLE_ERROR)
        self.assertIs(classify(KeyboardInterrupt()).kind, ValueKind.SINGLE_ERROR)

    def test_list_and_tuple_of_errors(self):
        errors = [ValueError("a"), RuntimeError("b")]
        self.assertEqual(classify(errors), Classified(ValueKind.ERROR_LIST, tuple(errors)))
        self.assertIs(classify(tuple(errors)).kind, ValueKind.ERROR_LIST)

    def test_empty_or_mixed_lists_are_data(self):
        self.assertIs(classify([]).kind, ValueKind.OTHER)
        self.assertIs(classify([ValueError("a"), 1]).kind, ValueKind.OTHER)

    def test_everything_else_is_other(self):
        for value in (0, "", False, {"a": 1}, [1, "two"], Pair(1, "s"), ValueError):
            with self.subTest(value=value):
                self.assertIs(classify(value).kind, ValueKind.OTHER)


class JSONResponderTests(unittest.TestCase):
    def setUp(self):
        self.responder = JSONResponder()

    def test_response_envelope(self):
        envelope = Envelope(status_code=202, data={"one": 1, "two": "second"}, errors=None)

        response = self.responder(_request(), envelope)

        self.assertEqual(response.status_code, 202)
        self.assertEqual(response.body, b'{"data":{"one":1,"two":"second"}}')
        self.assertEqual(response.headers["content-type"], "application/json")

    def test_build_response(self):
        response = self.responder(_request(), build_response(100, "to be continued..."))

        self.assertEqual(response.status_code, 100)
        self.assertEqual(response.body, b'{"data":"to be continued..."}')

    def test_single_error(self):
        response = self.responder(_request(), ValueError("some error"))

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.body, b'{"errors":[{"description":"some error"}]}')

    def test_multiple_errors(self):
        response = self.responder(
            _request(), [ValueError("some error"), ValueError("second error")]
        )

        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.body,
            b'{"errors":[{"description":"some error"},{"description":"second error"}]}',
        )

    def test_aggregate_error(self):
        group = ExceptionGroup(
            "batch", [ValueError("some error"), ExceptionGroup("nested", [OSError("disk full")])]
        )

        response = self.responder(_request(), group)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            json.loads(response.body),
            {"errors": [{"description": "some error"}, {"description": "disk full"}]},
        )

    def test_error_without_message_uses_type_name(self):
        response = self.responder(_request(), RuntimeError())

        self.assertEqual(json.loads(response.body), {"errors": [{"description": "RuntimeError"}]})

    def test_none_is_no_content(self):
        response = self.responder(_request(), None)

        self.assertEqual(response.status_code, 204)
        self.assertEqual(response.body, b"")

    def test_bodyless_envelope_status_drops_body(self):
        for code in (204, 304):
            with self.subTest(code=code):
                response = self.responder(_request(), build_response(code, "ignored"))

                self.assertEqual(response.status_code, code)
                self.assertEqual(response.body, b"")

    def test_plain_values_are_wrapped_as_data(self):
        cases = {
            "map": ({"1": 1, "two": "two"}, b'{"data":{"1":1,"two":"two"}}'),
            "slice": ([1, "two"], b'{"data":[1,"two"]}'),
            "string": ("the-response", b'{"data":"the-response"}'),
            "int": (1, b'{"data":1}'),
            "zero": (0, b'{"data":0}'),
            "empty list": ([], b'{"data":[]}'),
            "struct": (Pair(n=1, s="s"), b'{"data":{"n":1,"s":"s"}}'),
            "multiple_structs": (
                [Pair(n=1, s="s"), Pair(n=2, s="str")],
                b'{"data":[{"n":1,"s":"s"},{"n":2,"s":"str"}]}',
            ),
            "model": (Pet(name="Rex", age=3), b'{"data":{"name":"Rex","age":3}}'),
        }

        for key, (value, expected) in cases.items():
            with self.subTest(key=key):
                response = self.responder(_request(), value)
                self.assertEqual(response.status_code, 200)
                self.assertEqual(response.body, expected)

    def test_independent_calls_are_byte_identical(self):
        value = {"one": 1, "nested": [Pair(n=2, s="x")]}

        first = self.responder(_request(), value)
        second = self.responder(_request(), value)

        self.assertEqual(first.status_code, second.status_code)
        self.assertEqual(first.body, second.body)

    def test_absent_has_no_envelope(self):
        with self.assertRaises(ValueError):
            self.responder.to_envelope(Classified(ValueKind.ABSENT, None))

    def test_logs_classification_at_debug(self):
        with self.assertLogs("jsonresponder.api.responder", level="DEBUG") as logs:
            self.responder(_request("/things"), ValueError("boom"))

        self.assertIn("kind=single_error status=500 path=/things", logs.output[0])


if __name__ == "__main__":
    unittest.main()
