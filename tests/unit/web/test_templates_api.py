#!/usr/bin/env python3
"""
API tests for /api/v1/templates.
"""

import pytest

pytestmark = pytest.mark.db


def _create(client, **overrides):
    body = {
        "id": "offer",
        "name": "Offer Letter",
        "employment_type": "FULL_TIME",
        "body_text": "OFFER\n\nDear %{employee_name},\n\nYou start on %{start_date}.",
        "variable_schema": {
            "employee_name": {"label": "Employee Name"},
            "start_date": {"label": "Start Date", "type": "date"},
        },
    }
    body.update(overrides)
    return client.post("/api/v1/templates", json=body)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_template_derives_html(client):
    response = _create(client)

    assert response.status_code == 201
    template = response.json()["template"]
    assert template["id"] == "offer"
    assert template["placeholders"] == ["employee_name", "start_date"]
    assert "<h3" in template["body_html"]
    assert template["undeclared_placeholders"] == []
    assert template["variable_schema"]["start_date"]["type"] == "date"


def test_create_template_generates_id(client):
    response = _create(client, id=None, name="Sales Offer Letter")

    assert response.status_code == 201
    assert response.json()["template"]["id"].startswith("sales-offer-letter-")


def test_duplicate_id_conflicts(client):
    _create(client)
    response = _create(client)

    assert response.status_code == 409
    body = response.json()
    assert body["success"] is False
    assert body["type"] == "TemplateConflictException"


def test_permissive_create_reports_undeclared(client):
    response = _create(client, variable_schema={})

    assert response.status_code == 201
    assert response.json()["template"]["undeclared_placeholders"] == ["employee_name", "start_date"]


def test_strict_create_rejects_undeclared(client):
    response = client.post(
        "/api/v1/templates?strict=true",
        json={"name": "Bad", "body_text": "%{a} %{b}", "variable_schema": {"a": {"label": "A"}}},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["type"] == "InvalidTemplateException"
    assert body["missing"] == ["b"]


def test_invalid_body_is_422(client):
    response = client.post("/api/v1/templates", json={"name": "No body"})
    assert response.status_code == 422


def test_get_and_list(client):
    _create(client)
    _create(client, id="contract", name="Contractor Agreement", employment_type="CONTRACTOR")

    response = client.get("/api/v1/templates")
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert [t["id"] for t in data["templates"]] == ["contract", "offer"]

    filtered = client.get("/api/v1/templates", params={"employment_type": "CONTRACTOR"}).json()
    assert [t["id"] for t in filtered["templates"]] == ["contract"]

    detail = client.get("/api/v1/templates/offer").json()["template"]
    assert detail["body_text"].startswith("OFFER")


def test_get_missing_template(client):
    response = client.get("/api/v1/templates/missing")

    assert response.status_code == 404
    assert response.json()["type"] == "TemplateNotFoundException"


def test_update_template_rederives_html(client):
    _create(client)
    response = client.put(
        "/api/v1/templates/offer",
        json={"body_text": "BENEFITS\n\n- Health\n- Leave", "variable_schema": {}},
    )

    assert response.status_code == 200
    template = response.json()["template"]
    assert template["id"] == "offer"
    assert template["name"] == "Offer Letter"
    assert template["placeholders"] == []
    assert "<ul" in template["body_html"]


def test_update_can_deactivate(client):
    _create(client)
    client.put("/api/v1/templates/offer", json={"is_active": False})

    assert client.get("/api/v1/templates").json()["count"] == 0
    assert client.get("/api/v1/templates", params={"include_inactive": True}).json()["count"] == 1


def test_delete_unused_template(client):
    _create(client)
    response = client.delete("/api/v1/templates/offer")

    assert response.status_code == 200
    assert response.json()["deleted"] is True
    assert client.get("/api/v1/templates/offer").status_code == 404


def test_delete_template_in_use_deactivates(client):
    _create(client)
    client.post("/api/v1/contracts", json={"template_id": "offer", "variables": {"employee_name": "Jane"}})

    response = client.delete("/api/v1/templates/offer")

    assert response.json()["deleted"] is False
    assert response.json()["deactivated"] is True
    assert client.get("/api/v1/templates/offer").json()["template"]["is_active"] is False


def test_install_defaults_is_idempotent(client):
    first = client.post("/api/v1/templates/defaults").json()
    assert len(first["installed"]) == 7
    assert first["skipped"] == []

    second = client.post("/api/v1/templates/defaults").json()
    assert second["installed"] == []
    assert sorted(second["skipped"]) == sorted(first["installed"])

    confirmation = client.get("/api/v1/templates/confirmation-template").json()["template"]
    assert confirmation["undeclared_placeholders"] == ["duties", "benefits", "bonus"]


def test_preview(client):
    response = client.post(
        "/api/v1/templates/preview",
        json={"text": "TERMS\n\nHello %{name}, %{unknown}", "variables": {"name": "Jane"}},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["text"] == "TERMS\n\nHello Jane, %{unknown}"
    assert data["unresolved"] == ["unknown"]
    assert data["html"].startswith("<div")


def test_preview_simple_variant(client):
    response = client.post(
        "/api/v1/templates/preview",
        json={"text": "- single item", "variant": "simple"},
    )

    assert response.json()["html"].startswith("<ul")
