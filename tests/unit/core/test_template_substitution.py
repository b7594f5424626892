#!/usr/bin/env python3
"""
Unit tests for placeholder substitution and derived templates.
"""

import unittest

from core.templates.defaults import FULL_TIME_TEMPLATE, CONTRACTOR_REPLACEMENTS
from core.templates.html import HtmlVariant, text_to_html
from core.templates.substitution import (
    derive_default_template,
    find_placeholders,
    substitute,
    unresolved_placeholders,
)


class TestSubstitute(unittest.TestCase):

    def test_replaces_every_occurrence(self):
        text = "Dear %{name}, welcome %{name}!"
        self.assertEqual(substitute(text, {"name": "Jane"}), "Dear Jane, welcome Jane!")

    def test_unknown_placeholder_left_verbatim(self):
        text = "Start: %{start_date}, Salary: %{salary}"
        result = substitute(text, {"salary": "USD 5000"})
        self.assertEqual(result, "Start: %{start_date}, Salary: USD 5000")

    def test_none_value_left_verbatim(self):
        self.assertEqual(substitute("%{bonus}", {"bonus": None}), "%{bonus}")

    def test_empty_string_value_is_substituted(self):
        self.assertEqual(substitute("Bonus: %{bonus}.", {"bonus": ""}), "Bonus: .")

    def test_non_string_values_are_stringified(self):
        self.assertEqual(substitute("%{days} days", {"days": 14}), "14 days")

    def test_values_are_not_rescanned(self):
        """A value that looks like a placeholder is inserted literally."""
        result = substitute("%{a} %{b}", {"a": "%{b}", "b": "B"})
        self.assertEqual(result, "%{b} B")

    def test_unmapped_placeholders_are_stable(self):
        text = "%{x} and %{y} and %{x}"
        once = substitute(text, {"y": "Y"})
        self.assertEqual(once, "%{x} and Y and %{x}")
        self.assertEqual(substitute(once, {"y": "Z"}), once)

    def test_brace_only_syntax_is_not_a_placeholder(self):
        self.assertEqual(substitute("{name} %name", {"name": "Jane"}), "{name} %name")

    def test_empty_mapping_and_text(self):
        self.assertEqual(substitute("%{a}", {}), "%{a}")
        self.assertEqual(substitute("%{a}", None), "%{a}")
        self.assertEqual(substitute("", {"a": "b"}), "")

    def test_full_mapping_resolves_everything(self):
        names = find_placeholders(FULL_TIME_TEMPLATE)
        result = substitute(FULL_TIME_TEMPLATE, {name: f"<{name}>" for name in names})
        self.assertEqual(unresolved_placeholders(result), [])
        self.assertNotIn("%{", result)

    def test_substituted_text_converts_to_html(self):
        result = substitute(FULL_TIME_TEMPLATE, {"employee_name": "Jane Doe"})
        html = text_to_html(result, HtmlVariant.DOCUMENT)
        self.assertIn("Dear Jane Doe,", html)
        self.assertLess(html.index("COMPENSATION AND BENEFITS"), html.index("TERMINATION"))


class TestPlaceholders(unittest.TestCase):

    def test_find_placeholders_first_seen_order(self):
        text = "%{b} %{a} %{b} %{c_1}"
        self.assertEqual(find_placeholders(text), ["b", "a", "c_1"])

    def test_unresolved_placeholders_sorted(self):
        self.assertEqual(unresolved_placeholders("%{z} %{a} %{z}"), ["a", "z"])

    def test_unresolved_placeholders_against_variables(self):
        text = "%{a} %{b} %{c}"
        self.assertEqual(unresolved_placeholders(text, {"a": "%{x}", "b": None}), ["b", "c"])

    def test_malformed_tokens_ignored(self):
        self.assertEqual(find_placeholders("%{} %{a-b} %{ok} %{"), ["ok"])


class TestDeriveDefaultTemplate(unittest.TestCase):

    def test_contractor_agreement(self):
        derived = derive_default_template(
            FULL_TIME_TEMPLATE, [("Contract of Employment", "Contractor Agreement")]
        )
        self.assertIn("Contractor Agreement", derived)
        self.assertNotIn("Contract of Employment", derived)

    def test_replaces_first_occurrence_only(self):
        derived = derive_default_template("employment and employment", [("employment", "internship")])
        self.assertEqual(derived, "internship and employment")

    def test_replacements_apply_in_order(self):
        derived = derive_default_template("abc", [("a", "x"), ("x", "y")])
        self.assertEqual(derived, "ybc")

    def test_missing_target_is_a_no_op(self):
        derived = derive_default_template("abc", [("zzz", "x")])
        self.assertEqual(derived, "abc")

    def test_placeholders_survive_derivation(self):
        derived = derive_default_template(FULL_TIME_TEMPLATE, CONTRACTOR_REPLACEMENTS)
        self.assertEqual(find_placeholders(derived), find_placeholders(FULL_TIME_TEMPLATE))


if __name__ == '__main__':
    unittest.main()
