from unittest.mock import patch

import pytest

from outreach_app.suggestions import SuggestionError


def test_project_list(api_client):
    resp = api_client.get("/api/projects/")
    assert resp.status_code == 200
    assert [x["id"] for x in resp.json()] == ["2", "1", "3"]
    assert resp.json()[0]["status_label"] == "Planificación"


def test_project_list_query(api_client):
    resp = api_client.get("/api/projects/", {"query": "MARACAY"})
    assert resp.status_code == 200
    assert [x["id"] for x in resp.json()] == ["1"]


def test_project_create(api_client, app_store, project_data):
    resp = api_client.post("/api/projects/", project_data, format="json")
    assert resp.status_code == 201, resp.content

    body = resp.json()
    assert body["project_name"] == "Neighbourhood Reading Club"
    assert body["created_at"] == body["updated_at"]
    assert app_store.get_by_id(body["id"]) is not None
    assert len(app_store) == 4


def test_project_create_validation_errors(api_client, app_store, project_data):
    payload = {
        **project_data,
        "project_name": "ab",
        "project_lead": "Ana",
        "contact_information": "not-an-email",
        "status": "Cancelled",
        "description": "short",
    }
    resp = api_client.post("/api/projects/", payload, format="json")
    assert resp.status_code == 400

    body = resp.json()
    assert body["message"] == "Falló la validación. Por favor revisa los campos."
    assert set(body["errors"]) == {
        "project_name", "project_lead", "contact_information", "status", "description",
    }
    assert body["errors"]["contact_information"] == ["Por favor, introduce un correo electrónico válido."]
    assert len(app_store) == 3


def test_project_detail(api_client):
    resp = api_client.get("/api/projects/3/")
    assert resp.status_code == 200
    assert resp.json()["project_name"] == "River Cleanup Campaign"


def test_project_detail_not_found(api_client):
    resp = api_client.get("/api/projects/unknown/")
    assert resp.status_code == 404
    assert "error" in resp.json()


def test_project_patch_status(api_client, app_store):
    before = app_store.get_by_id("2")
    resp = api_client.patch("/api/projects/2/", {"status": "Completed"}, format="json")
    assert resp.status_code == 200, resp.content

    after = app_store.get_by_id("2")
    assert after.status == "Completed"
    assert after.updated_at > before.updated_at
    assert after.project_name == before.project_name


def test_project_put_requires_full_payload(api_client):
    resp = api_client.put("/api/projects/1/", {"status": "Completed"}, format="json")
    assert resp.status_code == 400
    assert "project_name" in resp.json()["errors"]


def test_project_put(api_client, project_data):
    payload = {**project_data, "status_description": "Waiting for materials"}
    resp = api_client.put("/api/projects/1/", payload, format="json")
    assert resp.status_code == 200, resp.content
    assert resp.json()["id"] == "1"
    assert resp.json()["status_description"] == "Waiting for materials"


def test_project_put_clears_omitted_optional_fields(api_client, app_store, project_data):
    assert app_store.get_by_id("1").project_type == "Agricultural Development"

    resp = api_client.put("/api/projects/1/", project_data, format="json")
    assert resp.status_code == 200, resp.content
    assert resp.json()["project_type"] is None
    assert app_store.get_by_id("1").project_type is None


def test_project_patch_keeps_omitted_optional_fields(api_client, app_store):
    resp = api_client.patch("/api/projects/1/", {"scope": "Two garden plots."}, format="json")
    assert resp.status_code == 200, resp.content
    assert app_store.get_by_id("1").project_type == "Agricultural Development"


def test_project_update_not_found(api_client, project_data):
    resp = api_client.put("/api/projects/unknown/", project_data, format="json")
    assert resp.status_code == 404


def test_project_delete(api_client, app_store):
    resp = api_client.delete("/api/projects/1/")
    assert resp.status_code == 204
    assert app_store.get_by_id("1") is None

    resp = api_client.delete("/api/projects/1/")
    assert resp.status_code == 404


def test_project_stats(api_client):
    resp = api_client.get("/api/projects/stats/")
    assert resp.status_code == 200
    assert resp.json() == {
        "total": 3, "planning": 1, "in_progress": 1, "completed": 1, "on_hold": 0,
    }


def test_recent_projects(api_client):
    resp = api_client.get("/api/projects/recent/", {"count": 2})
    assert resp.status_code == 200
    assert [x["id"] for x in resp.json()] == ["2", "1"]


def test_recent_projects_default_count(api_client):
    resp = api_client.get("/api/projects/recent/")
    assert len(resp.json()) == 3


@pytest.mark.parametrize("count", ["-1", "abc"])
def test_recent_projects_bad_count(api_client, count):
    resp = api_client.get("/api/projects/recent/", {"count": count})
    assert resp.status_code == 400


def test_suggest_details(api_client):
    suggestion = {
        "project_type": "Educational Program",
        "public_objective": "Promote reading habits.",
        "scope": "Weekly sessions at the local library.",
    }
    with patch("outreach_app.views.suggest_project_details", return_value=suggestion) as mocked:
        resp = api_client.post(
            "/api/projects/suggest/",
            {"description": "  Weekly reading sessions for children.  "},
            format="json",
        )
    assert resp.status_code == 200
    assert resp.json() == suggestion
    mocked.assert_called_once_with("Weekly reading sessions for children.")


def test_suggest_details_short_description(api_client):
    with patch("outreach_app.views.suggest_project_details") as mocked:
        resp = api_client.post("/api/projects/suggest/", {"description": "   too short   "}, format="json")
    assert resp.status_code == 400
    assert "description" in resp.json()["errors"]
    mocked.assert_not_called()


def test_suggest_details_failure(api_client):
    with patch("outreach_app.views.suggest_project_details", side_effect=SuggestionError("boom")):
        resp = api_client.post(
            "/api/projects/suggest/",
            {"description": "Community garden for local families."},
            format="json",
        )
    assert resp.status_code == 502
    assert resp.json()["error"].startswith("No se pudieron obtener sugerencias")


def test_suggest_details_failure_logs_traceback(api_client):
    with patch("outreach_app.views.suggest_project_details", side_effect=SuggestionError("boom")), \
            patch("outreach_app.views.logger") as logger:
        api_client.post(
            "/api/projects/suggest/",
            {"description": "Community garden for local families."},
            format="json",
        )
    logger.exception.assert_called_once()
    logger.error.assert_not_called()
