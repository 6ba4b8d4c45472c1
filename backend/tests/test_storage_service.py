import pytest

from app.services import storage_service


def test_extract_path_from_url():
    assert storage_service.extract_path_from_url("/uploads/logos/1-abc-logo.png") == ("logos", "1-abc-logo.png")
    assert storage_service.extract_path_from_url("https://site.test/uploads/general/a%20b.png") == ("general", "a b.png")
    assert storage_service.extract_path_from_url("https://cdn.example.com/logo.png") is None
    assert storage_service.extract_path_from_url("/uploads/logos") is None
    assert storage_service.extract_path_from_url(None) is None


def test_upload_and_list_stored_urls(upload_dir):
    url = storage_service.upload(b"abc", "general", "notes.txt", "text/plain")
    assert url.startswith("/uploads/general/")
    assert url.endswith("-notes.txt")
    assert storage_service.list_stored_urls() == {url}


def test_upload_rejects_unknown_folder():
    with pytest.raises(storage_service.StorageError):
        storage_service.upload(b"abc", "secrets", "a.txt")


def test_delete_many_reports_partial_failure(upload_dir):
    kept = storage_service.upload(b"abc", "general", "a.txt")
    ok = storage_service.delete_many_by_url([kept, "/uploads/unknown-folder/x.png", None], "general")
    assert ok is False
    assert storage_service.list_stored_urls() == set()


def test_upload_base64_strips_whitespace(upload_dir):
    result = storage_service.upload_base64("YWJj\nZGVm\n", "a.txt", "general")
    assert result.success is True
    assert result.size == 6
