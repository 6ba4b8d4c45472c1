from app.models.home import HeroSlide
from tests.conftest import auth_headers


def _create_slide(client, headers, **overrides):
    payload = {"image_url": "https://cdn.example.com/slide.jpg", "title": "Slide"}
    payload.update(overrides)
    resp = client.post("/api/admin/hero-slides", json=payload, headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


def test_add_appends_after_current_max(client, seed_users):
    headers = auth_headers(client)
    first = _create_slide(client, headers, title="A")
    second = _create_slide(client, headers, title="B")
    third = _create_slide(client, headers, title="C", display_order=10)
    fourth = _create_slide(client, headers, title="D")

    assert first["display_order"] == 0
    assert second["display_order"] == 1
    assert third["display_order"] == 10
    assert fourth["display_order"] == 11


def test_public_list_is_ordered_and_hides_inactive(client, seed_users):
    headers = auth_headers(client)
    _create_slide(client, headers, title="Late", display_order=5)
    _create_slide(client, headers, title="Hidden", display_order=1, is_active=False)
    _create_slide(client, headers, title="Early", display_order=2)
    _create_slide(client, headers, title="Tie", display_order=2)

    slides = client.get("/api/pages/home").json()["hero_slides"]
    assert [s["title"] for s in slides] == ["Early", "Tie", "Late"]


def test_added_record_reads_back_unchanged(client, seed_users):
    headers = auth_headers(client)
    supplied = {"image_url": "/uploads/hero-images/a.jpg", "title": "Courtyard", "subtitle": "Seoul, 2024"}
    created = _create_slide(client, headers, **supplied)

    slide = client.get("/api/pages/home").json()["hero_slides"][0]
    assert slide["id"] == created["id"]
    for key, value in supplied.items():
        assert slide[key] == value


def test_create_requires_image_url(client, seed_users):
    resp = client.post("/api/admin/hero-slides", json={"title": "No image"}, headers=auth_headers(client))
    assert resp.status_code == 422


def test_update_is_partial(client, seed_users):
    headers = auth_headers(client)
    slide = _create_slide(client, headers, title="Before", subtitle="Keep me")

    resp = client.put(f"/api/admin/hero-slides/{slide['id']}", json={"title": "After"}, headers=headers)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["title"] == "After"
    assert data["subtitle"] == "Keep me"


def test_update_unknown_id_is_404(client, seed_users):
    resp = client.put("/api/admin/hero-slides/999", json={"title": "x"}, headers=auth_headers(client))
    assert resp.status_code == 404
    assert resp.json()["success"] is False


def test_get_and_delete(client, db, seed_users):
    headers = auth_headers(client)
    slide = _create_slide(client, headers)

    assert client.get(f"/api/admin/hero-slides/{slide['id']}", headers=headers).status_code == 200

    resp = client.delete(f"/api/admin/hero-slides/{slide['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": {"id": slide["id"]}, "error": None}
    assert db.query(HeroSlide).count() == 0
    assert client.get(f"/api/admin/hero-slides/{slide['id']}", headers=headers).status_code == 404
    assert client.delete(f"/api/admin/hero-slides/{slide['id']}", headers=headers).status_code == 404


def test_admin_list_includes_inactive(client, seed_users):
    headers = auth_headers(client)
    _create_slide(client, headers, title="Visible")
    _create_slide(client, headers, title="Hidden", is_active=False)

    admin_rows = client.get("/api/admin/hero-slides", headers=headers).json()
    assert [row["title"] for row in admin_rows] == ["Visible", "Hidden"]

    public = client.get("/api/pages/home").json()
    assert [row["title"] for row in public["hero_slides"]] == ["Visible"]


def test_reorder_sets_display_order_to_index(client, seed_users):
    headers = auth_headers(client)
    a = _create_slide(client, headers, title="A")
    b = _create_slide(client, headers, title="B")
    c = _create_slide(client, headers, title="C")

    resp = client.put("/api/admin/hero-slides/reorder", json={"ids": [c["id"], a["id"], b["id"]]}, headers=headers)
    assert resp.status_code == 200
    assert [row["display_order"] for row in resp.json()["data"]] == [0, 1, 2]

    rows = client.get("/api/admin/hero-slides", headers=headers).json()
    assert [row["title"] for row in rows] == ["C", "A", "B"]


def test_reorder_is_idempotent(client, seed_users):
    headers = auth_headers(client)
    ids = [_create_slide(client, headers, title=t)["id"] for t in ("A", "B", "C")]
    order = [ids[2], ids[1], ids[0]]

    client.put("/api/admin/hero-slides/reorder", json={"ids": order}, headers=headers)
    first = client.get("/api/admin/hero-slides", headers=headers).json()
    client.put("/api/admin/hero-slides/reorder", json={"ids": order}, headers=headers)
    second = client.get("/api/admin/hero-slides", headers=headers).json()

    assert first == second


def test_reorder_with_unknown_id_changes_nothing(client, seed_users):
    headers = auth_headers(client)
    a = _create_slide(client, headers, title="A")
    b = _create_slide(client, headers, title="B")

    resp = client.put("/api/admin/hero-slides/reorder", json={"ids": [b["id"], 999, a["id"]]}, headers=headers)
    assert resp.status_code == 404
    assert resp.json()["success"] is False

    rows = client.get("/api/admin/hero-slides", headers=headers).json()
    assert [(row["title"], row["display_order"]) for row in rows] == [("A", 0), ("B", 1)]


def test_reorder_rejects_duplicate_ids(client, seed_users):
    headers = auth_headers(client)
    a = _create_slide(client, headers)
    resp = client.put("/api/admin/hero-slides/reorder", json={"ids": [a["id"], a["id"]]}, headers=headers)
    assert resp.status_code == 400


def test_team_members_role_filter(client, seed_users):
    headers = auth_headers(client)
    for name, role in (("Ana", "ceo"), ("Ben", "staff"), ("Cho", "leadership")):
        resp = client.post(
            "/api/admin/team-members",
            json={"name": name, "position": "Architect", "role": role},
            headers=headers,
        )
        assert resp.status_code == 200

    rows = client.get("/api/admin/team-members?role=staff", headers=headers).json()
    assert [row["name"] for row in rows] == ["Ben"]
    assert len(client.get("/api/admin/team-members", headers=headers).json()) == 3


def test_team_member_invalid_role_is_422(client, seed_users):
    resp = client.post(
        "/api/admin/team-members",
        json={"name": "X", "position": "Y", "role": "intern"},
        headers=auth_headers(client),
    )
    assert resp.status_code == 422


def test_timeline_description_falls_back_to_title(client, seed_users):
    headers = auth_headers(client)
    resp = client.post("/api/admin/timeline", json={"year": 2005, "title": "Founded"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["description"] == "Founded"

    missing = client.post("/api/admin/timeline", json={"year": 2006}, headers=headers)
    assert missing.status_code == 400


def test_timeline_admin_list_is_newest_year_first(client, seed_users):
    headers = auth_headers(client)
    for year in (1999, 2020, 2010):
        client.post("/api/admin/timeline", json={"year": year, "description": f"Year {year}"}, headers=headers)

    rows = client.get("/api/admin/timeline", headers=headers).json()
    assert [row["year"] for row in rows] == [2020, 2010, 1999]


def test_job_positions_crud(client, seed_users):
    headers = auth_headers(client)
    created = client.post("/api/admin/job-positions", json={"title": "Architect"}, headers=headers).json()["data"]
    assert created["job_type"] == "Full-time"

    updated = client.put(
        f"/api/admin/job-positions/{created['id']}",
        json={"location": "Seoul"},
        headers=headers,
    ).json()["data"]
    assert updated["location"] == "Seoul"

    assert client.delete(f"/api/admin/job-positions/{created['id']}", headers=headers).status_code == 200


def test_collaborations_and_office_gallery_crud(client, seed_users):
    headers = auth_headers(client)
    collab = client.post(
        "/api/admin/collaborations",
        json={"logo_url": "https://cdn.example.com/partner.png", "name": "Partner"},
        headers=headers,
    )
    assert collab.status_code == 200
    image = client.post(
        "/api/admin/office-gallery",
        json={"image_url": "https://cdn.example.com/office.jpg"},
        headers=headers,
    )
    assert image.status_code == 200
    principle = client.post("/api/admin/philosophy-principles", json={"title": "Context"}, headers=headers)
    assert principle.status_code == 200

    about = client.get("/api/pages/about").json()
    assert [row["name"] for row in about["collaborations"]] == ["Partner"]
    assert len(about["office_gallery"]) == 1
    assert [row["title"] for row in about["philosophy_principles"]] == ["Context"]
