#!/usr/bin/env python3
"""
Unit tests for the built-in contract templates.
"""

import unittest

from core.templates.defaults import build_default_templates, default_template_specs
from core.templates.html import HtmlVariant
from core.templates.models import EmploymentType, Template, TemplateValidationError, validate_template


class TestDefaultTemplates(unittest.TestCase):

    def setUp(self):
        self.templates = {t.id: t for t in build_default_templates()}

    def test_all_defaults_present(self):
        self.assertEqual(set(self.templates), {
            "full-time-template",
            "part-time-template",
            "contractor-template",
            "intern-template",
            "confirmation-template",
            "termination-template",
            "nda-template",
        })

    def test_employment_types(self):
        self.assertEqual(self.templates["full-time-template"].employment_type, EmploymentType.FULL_TIME)
        self.assertEqual(self.templates["intern-template"].employment_type, EmploymentType.INTERN)
        self.assertIsNone(self.templates["nda-template"].employment_type)

    def test_contractor_is_derived(self):
        body = self.templates["contractor-template"].body_text
        self.assertTrue(body.startswith("Contractor Agreement"))
        self.assertNotIn("Contract of Employment", body)
        self.assertIn("contractor engagement", body)

    def test_part_time_is_derived(self):
        body = self.templates["part-time-template"].body_text
        self.assertIn("part-time employment", body)
        self.assertNotIn("full-time", body)

    def test_intern_is_derived(self):
        body = self.templates["intern-template"].body_text
        self.assertTrue(body.startswith("Internship Agreement"))
        self.assertIn("%{employment_start_date}", body)

    def test_headings_rendered(self):
        html = self.templates["full-time-template"].body_html
        self.assertIn(">COMPENSATION AND BENEFITS</h3>", html)
        self.assertIn(">TERMINATION</h3>", html)

    def test_complete_schemas(self):
        for template_id in ("full-time-template", "termination-template", "nda-template"):
            template = self.templates[template_id]
            self.assertEqual(validate_template(template.body_text, template.variable_schema), [], template_id)

    def test_confirmation_schema_is_incomplete(self):
        template = self.templates["confirmation-template"]
        self.assertEqual(
            validate_template(template.body_text, template.variable_schema),
            ["duties", "benefits", "bonus"]
        )

    def test_confirmation_rejected_by_strict_build(self):
        spec = next(s for s in default_template_specs() if s["id"] == "confirmation-template")
        with self.assertRaises(TemplateValidationError):
            Template.build(strict=True, **spec)

    def test_variant_passed_through(self):
        templates = build_default_templates(variant=HtmlVariant.SIMPLE)
        self.assertFalse(templates[0].body_html.startswith("<div"))


if __name__ == '__main__':
    unittest.main()
