from datetime import date

from tests.conftest import auth_headers


def test_dashboard_empty(client, seed_users):
    resp = client.get("/api/admin/dashboard", headers=auth_headers(client))
    assert resp.status_code == 200
    data = resp.json()
    assert data["total_projects"] == 0
    assert data["unread_submissions"] == 0
    assert data["years_of_experience"] == 0
    assert data["recent_submissions"] == []


def test_dashboard_counts(client, seed_users):
    headers = auth_headers(client)
    for title, featured in (("A", True), ("B", False), ("C", True)):
        client.post(
            "/api/admin/projects",
            json={"title": title, "image_url": "https://cdn.example.com/a.jpg", "is_featured": featured},
            headers=headers,
        )
    client.post("/api/admin/team-members", json={"name": "Ana", "position": "Architect"}, headers=headers)
    client.post("/api/admin/timeline", json={"year": 2001, "title": "Founded"}, headers=headers)
    client.post("/api/admin/timeline", json={"year": 2015, "title": "Growth"}, headers=headers)
    for index in range(7):
        client.post(
            "/api/contact",
            json={
                "name": "V",
                "email": "v@example.com",
                "phone": "1",
                "subject": f"S{index}",
                "message": "Hello",
            },
        )

    data = client.get("/api/admin/dashboard", headers=headers).json()
    assert data["total_projects"] == 3
    assert data["featured_projects"] == 2
    assert data["total_team_members"] == 1
    assert data["total_contact_submissions"] == 7
    assert data["unread_submissions"] == 7
    assert data["years_of_experience"] == date.today().year - 2001
    assert len(data["recent_submissions"]) == 5
    assert data["recent_submissions"][0]["subject"] == "S6"
