#!/usr/bin/env python3
"""
ProvisioningService tests against the test database.
"""

import pytest

from core.provisioning.models import AppType
from core.provisioning.service import AppNotFoundError, EmployeeNotFoundError, ProvisioningService
from database.models import App, Employee, ProvisioningRuleRecord

pytestmark = pytest.mark.db


@pytest.fixture
def seeded(repo):
    employee = repo.employees.add(Employee(
        full_name="Jane Doe",
        department="Engineering",
        employment_type="FULL_TIME",
        location="Seoul",
        status="ACTIVE",
        meta={"jiraBoardId": "42"},
    ))
    google = repo.provisioning.add(App(type="GOOGLE_WORKSPACE", name="Google Workspace"))
    jira = repo.provisioning.add(App(type="JIRA", name="Jira"))
    repo.provisioning.add(App(type="SLACK", name="Slack", is_enabled=False))

    rules = [
        (google, "All employees", {}, {"groups": ["all@x"]}, 0, True),
        (google, "Engineering", {"department": "Engineering"},
         {"groups": ["eng@x"], "orgUnitPath": "/Engineering"}, 10, True),
        (google, "Retired rule", {}, {"orgUnitPath": "/Old"}, 99, False),
        (jira, "Board 42", {"jiraBoardId": "42"}, {"groups": ["jira-users"]}, 0, True),
        (jira, "Success", {"department": "Success"}, {"groups": ["jira-success"]}, 5, True),
    ]
    for app, name, condition, data, priority, active in rules:
        repo.provisioning.add(ProvisioningRuleRecord(
            app_id=app.id,
            name=name,
            condition=condition,
            provision_data=data,
            priority=priority,
            is_active=active,
        ))
    return {"employee": employee, "google": google, "jira": jira}


def test_resolve_for_employee(repo, seeded):
    results = ProvisioningService(repo).resolve_for_employee(seeded["employee"].id)

    by_name = {r.app_name: r for r in results}
    assert set(by_name) == {"Google Workspace", "Jira"}

    google = by_name["Google Workspace"]
    assert google.app_type == AppType.GOOGLE_WORKSPACE
    assert google.matched_rules == ["All employees", "Engineering"]
    assert google.payload == {"groups": ["eng@x"], "orgUnitPath": "/Engineering"}

    jira = by_name["Jira"]
    assert jira.matched_rules == ["Board 42"]
    assert jira.payload == {"groups": ["jira-users"], "projectRoles": []}


def test_resolve_for_app(repo, seeded):
    result = ProvisioningService(repo).resolve_for_app(seeded["employee"].id, seeded["google"].id)

    assert result.app_id == seeded["google"].id
    assert result.has_match


def test_no_matching_rule_gives_empty_payload(repo, seeded):
    employee = repo.employees.add(Employee(full_name="Sam Lee", department="Success"))
    result = ProvisioningService(repo).resolve_for_app(employee.id, seeded["jira"].id)

    assert result.matched_rules == ["Success"]

    newcomer = repo.employees.add(Employee(full_name="Kai Park", department="Finance"))
    result = ProvisioningService(repo).resolve_for_app(newcomer.id, seeded["jira"].id)

    assert not result.has_match
    assert result.payload == {}


def test_malformed_rule_data_tolerated(repo, seeded):
    repo.provisioning.add(ProvisioningRuleRecord(
        app_id=seeded["google"].id,
        name="Broken",
        condition=["not", "a", "mapping"],
        provision_data="not a mapping",
        priority=20,
    ))

    result = ProvisioningService(repo).resolve_for_app(seeded["employee"].id, seeded["google"].id)

    assert "Broken" in result.matched_rules
    assert result.payload == {"groups": ["eng@x"], "orgUnitPath": "/Engineering"}


def test_unknown_employee(repo, seeded):
    with pytest.raises(EmployeeNotFoundError):
        ProvisioningService(repo).resolve_for_employee("missing")


def test_unknown_app(repo, seeded):
    with pytest.raises(AppNotFoundError):
        ProvisioningService(repo).resolve_for_app(seeded["employee"].id, "missing")


def test_other_app_types_resolved_alongside_known_ones(repo, seeded):
    webflow = repo.provisioning.add(App(type="WEBFLOW", name="Webflow"))
    zoom = repo.provisioning.add(App(type="ZOOM", name="Zoom"))
    for app in (webflow, zoom):
        repo.provisioning.add(ProvisioningRuleRecord(
            app_id=app.id, name="All employees", condition={}, provision_data={"role": "member"}, priority=0
        ))

    results = ProvisioningService(repo).resolve_for_employee(seeded["employee"].id)

    by_name = {r.app_name: r for r in results}
    assert set(by_name) == {"Google Workspace", "Jira", "Webflow", "Zoom"}
    assert by_name["Webflow"].app_type == AppType.WEBFLOW
    assert by_name["Webflow"].payload == {"role": "member"}
    assert by_name["Zoom"].app_type_name == "ZOOM"
    assert by_name["Zoom"].payload == {"role": "member"}
    assert by_name["Google Workspace"].payload == {"groups": ["eng@x"], "orgUnitPath": "/Engineering"}


def test_failing_app_skipped(repo, seeded, monkeypatch):
    get_rules = repo.provisioning.get_rules_for_app

    def flaky_rules(app_id):
        if app_id == seeded["jira"].id:
            raise RuntimeError("rules unavailable")
        return get_rules(app_id)

    monkeypatch.setattr(repo.provisioning, "get_rules_for_app", flaky_rules)

    results = ProvisioningService(repo).resolve_for_employee(seeded["employee"].id)

    assert [r.app_name for r in results] == ["Google Workspace"]
    assert results[0].matched_rules == ["All employees", "Engineering"]
