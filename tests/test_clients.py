"""Client CRUD, social contacts round-trip and the transactional update."""

from app.domain.models.client import Client


def test_social_contacts_round_trip(api, make_client):
    created = make_client(social_contacts={"whatsapp": "123", "linkedin": "abc"})

    fetched = api.get(f"/api/clients/{created['id']}").json()["data"]

    assert fetched["social_contacts"] == {"whatsapp": "123", "linkedin": "abc"}


def test_malformed_social_contacts_read_back_as_null(api, db_session):
    client = Client(company_name="Legacy", contact_person="Legacy", email="legacy@example.com",
                    social_contacts="{not json")
    db_session.add(client)
    db_session.commit()

    fetched = api.get(f"/api/clients/{client.id}").json()["data"]

    assert fetched["social_contacts"] is None


def test_stored_social_contacts_with_odd_values_do_not_break_listing(api, db_session, make_client):
    make_client(company_name="Healthy")
    legacy = Client(company_name="Legacy", contact_person="Legacy", email="legacy@example.com",
                    social_contacts='{"whatsapp": 5551234, "linkedin": null, "extra": [1]}')
    odd = Client(company_name="Odd", contact_person="Odd", email="odd@example.com",
                 social_contacts='{"whatsapp": {"n": 1}, "linkedin": true}')
    db_session.add_all([legacy, odd])
    db_session.commit()

    response = api.get("/api/clients")

    assert response.status_code == 200, response.text
    by_name = {c["company_name"]: c for c in response.json()["data"]}
    assert by_name["Legacy"]["social_contacts"] == {"whatsapp": "5551234", "linkedin": None}
    assert by_name["Odd"]["social_contacts"] == {"whatsapp": None, "linkedin": None}
    assert api.get("/api/reports").status_code == 200


def test_contact_person_defaults_to_company_name(make_client):
    created = make_client(company_name="Initech")

    assert created["contact_person"] == "Initech"
    assert created["status"] == "active"


def test_invalid_email_is_rejected(api):
    response = api.post("/api/clients", json={"company_name": "Acme", "email": "not-an-email"})

    assert response.status_code == 400
    assert response.json()["error"]["details"]["fields"] == ["email"]


def test_duplicate_email_is_a_client_error(api, make_client):
    make_client(email="dup@example.com")

    response = api.post("/api/clients", json={"company_name": "Other", "email": "dup@example.com"})

    assert response.status_code == 400


def test_list_embeds_projects(api, make_client, make_project):
    client = make_client(company_name="Acme")
    make_project(client_id=client["id"], title="Portal")
    make_client(company_name="Empty")

    clients = {c["company_name"]: c for c in api.get("/api/clients").json()["data"]}

    assert [p["title"] for p in clients["Acme"]["projects"]] == ["Portal"]
    assert clients["Acme"]["projects"][0]["client_name"] == "Acme"
    assert clients["Empty"]["projects"] == []


def test_update_changes_only_given_fields(api, make_client):
    client = make_client(company_name="Acme", phone="555", social_contacts={"whatsapp": "1"})

    response = api.put(
        f"/api/clients/{client['id']}",
        json={"status": "inactive", "social_contacts": {"linkedin": "acme"}},
    )

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["status"] == "inactive"
    assert updated["company_name"] == "Acme"
    assert updated["phone"] == "555"
    assert updated["social_contacts"] == {"whatsapp": None, "linkedin": "acme"}


def test_failed_update_leaves_row_unchanged(api, make_client):
    make_client(email="taken@example.com")
    client = make_client(company_name="Original", email="mine@example.com", country="PT")

    response = api.put(
        f"/api/clients/{client['id']}",
        json={"company_name": "Renamed", "country": "ES", "email": "taken@example.com"},
    )

    assert response.status_code == 400
    reread = api.get(f"/api/clients/{client['id']}").json()["data"]
    assert reread["company_name"] == "Original"
    assert reread["country"] == "PT"
    assert reread["email"] == "mine@example.com"


def test_missing_client_is_404(api):
    assert api.get("/api/clients/999").status_code == 404
    assert api.put("/api/clients/999", json={"company_name": "X"}).status_code == 404
    assert api.delete("/api/clients/999").status_code == 404


def test_delete_detaches_projects(api, make_client, make_project):
    client = make_client()
    project = make_project(client_id=client["id"])

    response = api.delete(f"/api/clients/{client['id']}")

    assert response.status_code == 200
    assert response.json()["data"] == {"id": client["id"]}
    assert api.get(f"/api/projects/{project['id']}").json()["data"]["client_id"] is None


def test_dashboard_stats(api, make_client, make_project):
    active = make_client()
    make_client(status="inactive")
    make_project(client_id=active["id"], status="in_progress")
    make_project(client_id=active["id"], status="completed")

    stats = api.get("/api/clients/dashboard/stats").json()["data"]

    assert stats == {"totalClients": 2, "activeClients": 1, "totalProjects": 2, "activeProjects": 1}
