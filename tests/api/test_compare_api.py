import hashlib

import pytest
from fastapi.testclient import TestClient

from hash_verifier.app import create_app
from hash_verifier.config import settings
from hash_verifier.services.comparison import comparison_orchestrator


@pytest.fixture
def client():
    comparison_orchestrator.reset()
    yield TestClient(create_app())
    comparison_orchestrator.reset()


def test_list_algorithms(client):
    resp = client.get("/api/algorithms")
    assert resp.status_code == 200
    data = resp.json()
    assert data["algorithms"] == ["MD5", "SHA-1", "SHA-256", "SHA-384", "SHA-512"]
    assert data["default"] == "MD5"


def test_list_formats(client):
    resp = client.get("/api/formats")
    formats = {f["format"]: f for f in resp.json()["formats"]}
    assert set(formats) == {"txt", "json", "csv", "html", "pdf"}
    assert formats["pdf"]["media_type"] == "application/pdf"


def test_file_vs_file_match(client):
    resp = client.post(
        "/api/compare",
        data={"mode": "file_vs_file", "algorithm": "SHA-256", "source_last_modified": "1700000000000"},
        files={
            "source": ("a.txt", b"hello world", "text/plain"),
            "comparison": ("b.txt", b"hello world", "text/plain"),
        },
    )
    assert resp.status_code == 200
    report = resp.json()
    assert report["match"] is True
    assert report["algorithm"] == "SHA-256"
    assert report["source_hash"] == hashlib.sha256(b"hello world").hexdigest()
    assert report["target_identifier"] == "b.txt"
    assert report["source_file"]["size"] == 11
    assert report["source_file"]["last_modified"].startswith("2023-11-14T22:13:20")


def test_file_vs_hash_trims_expected_value(client):
    expected = " " + hashlib.md5(b"abc").hexdigest().upper() + "\n"
    resp = client.post(
        "/api/compare",
        data={"mode": "file_vs_hash", "algorithm": "md5", "expected_hash": expected},
        files={"source": ("abc.txt", b"abc", "text/plain")},
    )
    assert resp.status_code == 200
    assert resp.json()["match"] is True
    assert resp.json()["target_identifier"] == "Expected Hash"


def test_missing_comparison_file(client):
    resp = client.post(
        "/api/compare",
        data={"mode": "file_vs_file"},
        files={"source": ("a.txt", b"x", "text/plain")},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please select a comparison file."

    status = client.get("/api/compare/status").json()
    assert status["state"] == "error"
    assert status["error"] == "Please select a comparison file."


def test_missing_source_file(client):
    resp = client.post("/api/compare", data={"mode": "file_vs_hash", "expected_hash": "00"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please select a source file."


def test_missing_expected_hash(client):
    resp = client.post(
        "/api/compare",
        data={"mode": "file_vs_hash", "expected_hash": "   "},
        files={"source": ("a.txt", b"x", "text/plain")},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please enter the expected hash value."


def test_unsupported_algorithm(client):
    resp = client.post(
        "/api/compare",
        data={"mode": "file_vs_hash", "algorithm": "CRC32", "expected_hash": "00"},
        files={"source": ("a.txt", b"x", "text/plain")},
    )
    assert resp.status_code == 400
    assert "CRC32" in resp.json()["detail"]


def test_upload_size_limit(client, monkeypatch):
    monkeypatch.setattr(settings, "max_upload_size_mb", 0)
    resp = client.post(
        "/api/compare",
        data={"mode": "file_vs_hash", "expected_hash": "00"},
        files={"source": ("big.bin", b"x" * 10, "application/octet-stream")},
    )
    assert resp.status_code == 413


@pytest.mark.parametrize("field", ["source_last_modified", "comparison_last_modified"])
def test_out_of_range_last_modified_is_rejected(client, field):
    resp = client.post(
        "/api/compare",
        data={"mode": "file_vs_file", field: str(10**18)},
        files={
            "source": ("a.txt", b"x", "text/plain"),
            "comparison": ("b.txt", b"x", "text/plain"),
        },
    )
    assert resp.status_code == 400
    assert "Invalid last-modified timestamp" in resp.json()["detail"]


def test_status_and_reset(client):
    client.post(
        "/api/compare",
        data={"mode": "file_vs_hash", "expected_hash": "00"},
        files={"source": ("a.txt", b"x", "text/plain")},
    )
    status = client.get("/api/compare/status").json()
    assert status["state"] == "reported"
    assert status["report_id"]

    resp = client.post("/api/compare/reset")
    assert resp.json() == {"state": "idle"}
    assert client.get("/api/report").status_code == 404
