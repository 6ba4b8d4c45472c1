import base64

from app.config import settings
from app.services import storage_service
from tests.conftest import EDITOR_EMAIL, auth_headers

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"0" * 32


def _b64(data: bytes = PNG_BYTES) -> str:
    return base64.b64encode(data).decode()


def _stored_path(upload_dir, url: str):
    folder, name = storage_service.extract_path_from_url(url)
    return upload_dir / folder / name


def test_upload_requires_auth(client, seed_users):
    resp = client.post("/api/admin/uploads", json={"file_data": _b64(), "file_name": "a.png"})
    assert resp.status_code == 401


def test_base64_upload_success(client, seed_users, upload_dir):
    resp = client.post(
        "/api/admin/uploads",
        json={"file_data": _b64(), "file_name": "My Photo (1).png", "folder": "hero-images", "content_type": "image/png"},
        headers=auth_headers(client),
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["url"].startswith("/uploads/hero-images/")
    assert data["url"].endswith("-My_Photo__1_.png")
    assert data["size"] == len(PNG_BYTES)
    assert _stored_path(upload_dir, data["url"]).read_bytes() == PNG_BYTES


def test_base64_upload_accepts_data_url(client, seed_users):
    resp = client.post(
        "/api/admin/uploads",
        json={"file_data": f"data:image/png;base64,{_b64()}", "file_name": "a.png", "folder": "logos"},
        headers=auth_headers(client),
    )
    assert resp.status_code == 200
    assert resp.json()["url"].startswith("/uploads/logos/")


def test_base64_upload_does_not_check_mime_type(client, seed_users):
    resp = client.post(
        "/api/admin/uploads",
        json={"file_data": _b64(b"%PDF-1.4"), "file_name": "brochure.pdf", "content_type": "application/pdf"},
        headers=auth_headers(client),
    )
    assert resp.status_code == 200
    assert resp.json()["url"].startswith("/uploads/general/")


def test_base64_upload_rejects_invalid_data(client, seed_users):
    resp = client.post(
        "/api/admin/uploads",
        json={"file_data": "***not base64***", "file_name": "a.png"},
        headers=auth_headers(client),
    )
    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert resp.json()["url"] is None


def test_upload_rejects_unknown_folder(client, seed_users):
    resp = client.post(
        "/api/admin/uploads",
        json={"file_data": _b64(), "file_name": "a.png", "folder": "../etc"},
        headers=auth_headers(client),
    )
    assert resp.status_code == 400


def test_upload_enforces_size_limit(client, seed_users, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 16)
    resp = client.post(
        "/api/admin/uploads",
        json={"file_data": _b64(), "file_name": "a.png"},
        headers=auth_headers(client),
    )
    assert resp.status_code == 400
    assert "limit" in resp.json()["error"]


def test_multipart_upload(client, seed_users, upload_dir):
    files = {"file": ("team.jpg", PNG_BYTES, "image/jpeg")}
    resp = client.post(
        "/api/admin/uploads/files",
        files=files,
        data={"folder": "team-photos"},
        headers=auth_headers(client, EDITOR_EMAIL),
    )
    assert resp.status_code == 200
    url = resp.json()["url"]
    assert url.startswith("/uploads/team-photos/")
    assert _stored_path(upload_dir, url).exists()


def test_multipart_upload_rejects_empty_file(client, seed_users):
    files = {"file": ("empty.jpg", b"", "image/jpeg")}
    resp = client.post("/api/admin/uploads/files", files=files, headers=auth_headers(client))
    assert resp.status_code == 400


def test_delete_asset_by_url(client, seed_users, upload_dir):
    headers = auth_headers(client)
    url = client.post(
        "/api/admin/uploads",
        json={"file_data": _b64(), "file_name": "a.png", "folder": "general"},
        headers=headers,
    ).json()["url"]
    path = _stored_path(upload_dir, url)
    assert path.exists()

    resp = client.delete("/api/admin/uploads", params={"url": url, "folder": "general"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["success"] is True
    assert not path.exists()

    again = client.delete("/api/admin/uploads", params={"url": url, "folder": "general"}, headers=headers)
    assert again.json()["success"] is True


def test_delete_ignores_foreign_urls(client, seed_users):
    resp = client.delete(
        "/api/admin/uploads",
        params={"url": "https://cdn.example.com/x.png", "folder": "general"},
        headers=auth_headers(client),
    )
    assert resp.status_code == 200
    assert resp.json()["success"] is True


def test_delete_refuses_path_traversal(client, seed_users, upload_dir):
    secret = upload_dir / "secret.txt"
    secret.write_text("keep")
    resp = client.delete(
        "/api/admin/uploads",
        params={"url": "/uploads/general/../secret.txt", "folder": "general"},
        headers=auth_headers(client),
    )
    assert resp.json()["success"] is False
    assert secret.exists()


def test_collection_delete_removes_owned_asset(client, seed_users, upload_dir):
    headers = auth_headers(client)
    url = client.post(
        "/api/admin/uploads",
        json={"file_data": _b64(), "file_name": "slide.png", "folder": "hero-images"},
        headers=headers,
    ).json()["url"]
    slide = client.post("/api/admin/hero-slides", json={"image_url": url}, headers=headers).json()["data"]

    resp = client.delete(f"/api/admin/hero-slides/{slide['id']}", headers=headers)
    assert resp.status_code == 200
    assert not _stored_path(upload_dir, url).exists()


def test_project_delete_removes_gallery_assets(client, seed_users, upload_dir):
    headers = auth_headers(client)
    urls = [
        client.post(
            "/api/admin/uploads",
            json={"file_data": _b64(), "file_name": f"p{index}.png", "folder": "project-images"},
            headers=headers,
        ).json()["url"]
        for index in range(3)
    ]
    project = client.post(
        "/api/admin/projects",
        json={"title": "House", "image_url": urls[0], "gallery_images": urls[1:]},
        headers=headers,
    ).json()["data"]

    client.delete(f"/api/admin/projects/{project['id']}", headers=headers)
    for url in urls:
        assert not _stored_path(upload_dir, url).exists()


def test_row_delete_succeeds_when_asset_is_already_gone(client, seed_users):
    headers = auth_headers(client)
    slide = client.post(
        "/api/admin/hero-slides",
        json={"image_url": "/uploads/hero-images/missing.png"},
        headers=headers,
    ).json()["data"]
    resp = client.delete(f"/api/admin/hero-slides/{slide['id']}", headers=headers)
    assert resp.status_code == 200


def test_orphan_cleanup_dry_run_and_apply(client, seed_users, upload_dir):
    headers = auth_headers(client)

    def upload(name):
        return client.post(
            "/api/admin/uploads",
            json={"file_data": _b64(), "file_name": name, "folder": "team-photos"},
            headers=headers,
        ).json()["url"]

    used_url = upload("used.png")
    orphan_url = upload("orphan.png")
    client.post(
        "/api/admin/team-members",
        json={"name": "Ana", "position": "Architect", "photo_url": used_url},
        headers=headers,
    )

    dry = client.post("/api/admin/uploads/cleanup?dry_run=true", headers=headers)
    assert dry.status_code == 200
    dry_data = dry.json()
    assert dry_data["orphan_urls"] == [orphan_url]
    assert dry_data["deleted_count"] == 0
    assert _stored_path(upload_dir, orphan_url).exists()

    applied = client.post("/api/admin/uploads/cleanup?dry_run=false", headers=headers).json()
    assert applied["deleted_count"] == 1
    assert not _stored_path(upload_dir, orphan_url).exists()
    assert _stored_path(upload_dir, used_url).exists()


def test_orphan_cleanup_is_admin_only(client, seed_users):
    resp = client.post("/api/admin/uploads/cleanup", headers=auth_headers(client, EDITOR_EMAIL))
    assert resp.status_code == 403
