import unittest

import pydantic

from schemas.account import FormData
from services.validation import (
    build_validation_problem,
    collect_validation_errors,
    group_pydantic_errors,
    validation_problem_from_errors,
)


class TestCollectValidationErrors(unittest.TestCase):
    def test_names_converted_and_order_kept(self):
        errors = collect_validation_errors([("FirstName", ["required"]), ("Email", ["required"])])
        self.assertEqual([e.name for e in errors], ["first_name", "email"])

    def test_one_entry_per_message(self):
        errors = collect_validation_errors([("Password", ["too short", "needs a digit"]), ("Email", ["invalid"])])
        self.assertEqual(
            [(e.name, e.description) for e in errors],
            [("password", "too short"), ("password", "needs a digit"), ("email", "invalid")],
        )

    def test_fields_without_messages_skipped(self):
        errors = collect_validation_errors([("FirstName", []), ("LastName", ["required"])])
        self.assertEqual([e.name for e in errors], ["last_name"])

    def test_custom_policy(self):
        errors = collect_validation_errors([("FirstName", ["x"])], naming_policy=str.upper)
        self.assertEqual(errors[0].name, "FIRSTNAME")

    def test_build_problem(self):
        problem = build_validation_problem([("FirstName", ["required"]), ("Email", ["required"])])
        self.assertEqual(problem.status, 400)
        self.assertEqual(problem.instance, "CT Portal")
        self.assertEqual([e.name for e in problem.validation_errors], ["first_name", "email"])

    def test_build_problem_instance_override(self):
        problem = build_validation_problem([], instance="node-2")
        self.assertEqual(problem.instance, "node-2")
        self.assertEqual(problem.validation_errors, [])


class TestGroupPydanticErrors(unittest.TestCase):
    def _errors(self, payload):
        with self.assertRaises(pydantic.ValidationError) as ctx:
            FormData.model_validate(payload)
        return ctx.exception.errors()

    def test_missing_fields_reported_exhaustively(self):
        grouped = group_pydantic_errors(self._errors({"Password": "secret", "LastName": "Lee"}))
        self.assertEqual(
            grouped,
            [
                ("Email", ["The Email field is required."]),
                ("FirstName", ["The FirstName field is required."]),
            ],
        )

    def test_null_treated_as_missing(self):
        grouped = group_pydantic_errors(
            self._errors({"Email": None, "Password": "p", "FirstName": "Ann", "LastName": "Lee"})
        )
        self.assertEqual(grouped, [("Email", ["The Email field is required."])])

    def test_wrong_type_keeps_pydantic_message(self):
        grouped = group_pydantic_errors(
            self._errors({"Email": "a@b.c", "Password": 123, "FirstName": "Ann", "LastName": "Lee"})
        )
        self.assertEqual(grouped[0][0], "Password")
        self.assertNotIn("required", grouped[0][1][0])

    def test_request_location_stripped(self):
        errors = [
            {"type": "missing", "loc": ("body", "FirstName"), "msg": "Field required"},
            {"type": "string_too_short", "loc": ("body", "Address", "Lines", 0), "msg": "too short"},
        ]
        self.assertEqual(
            group_pydantic_errors(errors),
            [("FirstName", ["The FirstName field is required."]), ("Address.Lines[0]", ["too short"])],
        )

    def test_body_level_errors(self):
        errors = [
            {"type": "json_invalid", "loc": ("body", 12), "msg": "JSON decode error"},
            {"type": "dict_type", "loc": ("body",), "msg": "Input should be a valid dictionary"},
        ]
        self.assertEqual(
            group_pydantic_errors(errors),
            [("body", ["JSON decode error", "Input should be a valid dictionary"])],
        )

    def test_problem_from_errors_converts_nested_names(self):
        errors = [{"type": "value_error", "loc": ("body", "Address", "Lines", 0, "ZipCode"), "msg": "bad zip"}]
        problem = validation_problem_from_errors(errors)
        self.assertEqual(problem.validation_errors[0].name, "address.lines[0].zip_code")
        self.assertEqual(problem.validation_errors[0].description, "bad zip")


if __name__ == "__main__":
    unittest.main()
