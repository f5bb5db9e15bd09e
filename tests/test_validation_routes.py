"""
Tests for the validation HTTP routes.
"""

import pytest
from fastapi.testclient import TestClient

from harborcheck.config import settings
from harborcheck.main import app


@pytest.fixture
def client():
    return TestClient(app)


def _upload(client, content, filename="data.csv", **params):
    return client.post(
        "/validation",
        params=params,
        files={"file": (filename, content, "text/csv")},
    )


class TestHealth:
    def test_root(self, client):
        assert client.get("/").json()["message"] == "HarborCheck API is running"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


class TestTaxonomyRoute:
    def test_lists_every_rule(self, client):
        rules = client.get("/validation/taxonomy").json()
        assert len(rules) == 13
        assert rules[0] == {
            "category": "name",
            "labels": [{"text": "name", "tolerance": 1}],
            "pattern": "name",
        }

    def test_label_only_rule_has_no_pattern(self, client):
        rules = client.get("/validation/taxonomy").json()
        phone = next(r for r in rules if r["category"] == "telephone_number")
        assert phone["pattern"] is None


class TestValidateRoute:
    CSV = b"Email,col1,notes\na@b.com,hello,x\nc@d.org,123-45-6789,y\n"

    def test_warnings(self, client):
        response = _upload(client, self.CSV)
        assert response.status_code == 200
        body = response.json()
        assert body["filename"] == "data.csv"
        assert body["row_count"] == 2
        assert body["warnings"] == [
            {"column": 0, "column_name": "Email", "row": 0,
             "category": "email_address", "evidence": "Email"},
            {"column": 1, "column_name": "col1", "row": 2,
             "category": "social_security_number", "evidence": "123-45-6789"},
        ]

    def test_report(self, client):
        report = _upload(client, self.CSV).json()["report"]
        assert report["header_matches"] == 1
        assert report["value_matches"] == 1
        assert report["unflagged_columns"] == ["notes"]
        assert report["is_compliant"] is False

    def test_limit_query(self, client):
        body = _upload(client, self.CSV, limit=1).json()
        assert body["row_limit"] == 1
        assert [w["row"] for w in body["warnings"]] == [0]

    def test_default_limit_from_settings(self, client, monkeypatch):
        monkeypatch.setattr(settings, "DEFAULT_ROW_LIMIT", 1)
        body = _upload(client, self.CSV).json()
        assert body["row_limit"] == 1
        assert len(body["warnings"]) == 1

    def test_clean_file(self, client):
        body = _upload(client, b"diagnosis,count\nflu,3\n").json()
        assert body["warnings"] == []
        assert body["report"]["is_compliant"] is True

    def test_rejected_extension(self, client):
        response = _upload(client, b"x", filename="data.txt")
        assert response.status_code == 400
        assert "not allowed" in response.json()["detail"]

    def test_oversized_upload_rejected_before_parsing(self, client, monkeypatch):
        def fail_read(*args, **kwargs):
            raise AssertionError("oversized upload was read")

        monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 0)
        monkeypatch.setattr("harborcheck.routes.validation.read_table", fail_read)
        response = _upload(client, self.CSV)
        assert response.status_code == 400
        assert "too large" in response.json()["detail"]

    def test_unparseable_file(self, client):
        response = _upload(client, b"")
        assert response.status_code == 422
