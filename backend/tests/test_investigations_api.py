import unittest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from config import settings
from services.storage import InMemoryStorageClient
from tests.support import clear_overrides, make_client, make_session_factory


class InvestigationApiTests(unittest.TestCase):
    def setUp(self):
        self.storage = InMemoryStorageClient()
        self.client = make_client(make_session_factory(), self.storage)

    def tearDown(self):
        clear_overrides()

    def _create(self, **overrides):
        body = {"title": "Furto no Centro", "assigned_investigator": "Investigador Silva"}
        body.update(overrides)
        response = self.client.post("/investigations/", json=body)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def test_create_and_fetch(self):
        created = self._create(description="Honda Civic levado do estacionamento")
        self.assertEqual(created["ro_number"], "1.0")
        self.assertEqual(created["status"], "Aberta")
        self.assertEqual(created["media_urls"], [])

        response = self.client.get(f"/investigations/{created['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["description"], "Honda Civic levado do estacionamento")

    def test_blank_title_is_rejected(self):
        response = self.client.post(
            "/investigations/", json={"title": "   ", "assigned_investigator": "Silva"}
        )
        self.assertEqual(response.status_code, 422)

    def test_unknown_status_is_rejected(self):
        response = self.client.post(
            "/investigations/",
            json={"title": "Caso", "assigned_investigator": "Silva", "status": "Fechada"},
        )
        self.assertEqual(response.status_code, 422)

    def test_list_newest_first(self):
        first = self._create()
        second = self._create(title="Roubo de carga")
        ids = [item["id"] for item in self.client.get("/investigations/").json()]
        self.assertEqual(ids, [second["id"], first["id"]])
        self.assertEqual(second["ro_number"], "2.0")

    def test_partial_update(self):
        created = self._create()
        response = self.client.put(
            f"/investigations/{created['id']}", json={"status": "Concluída"}
        )
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["status"], "Concluída")
        self.assertEqual(payload["title"], "Furto no Centro")
        self.assertEqual(payload["ro_number"], "1.0")

    def test_update_rejects_null_title(self):
        created = self._create()
        response = self.client.put(f"/investigations/{created['id']}", json={"title": None})
        self.assertEqual(response.status_code, 422)

    def test_missing_record_uses_error_envelope(self):
        response = self.client.get("/investigations/does-not-exist")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["success"], False)
        self.assertIn("does-not-exist", response.json()["error"])

    def test_media_upload_and_removal(self):
        created = self._create()
        response = self.client.post(
            f"/investigations/{created['id']}/media",
            files=[
                ("files", ("cena 1.jpg", b"jpeg-bytes", "image/jpeg")),
                ("files", ("laudo.pdf", b"pdf-bytes", "application/pdf")),
            ],
        )
        self.assertEqual(response.status_code, 200, response.text)
        urls = response.json()["media_urls"]
        self.assertEqual(len(urls), 2)
        self.assertIn(f"/{settings.INVESTIGATION_MEDIA_BUCKET}/{created['id']}/", urls[0])
        self.assertTrue(urls[0].endswith("_cena_1.jpg"))

        response = self.client.delete(
            f"/investigations/{created['id']}/media", params={"url": urls[0]}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["media_urls"], [urls[1]])
        self.assertEqual(len(self.storage.keys(settings.INVESTIGATION_MEDIA_BUCKET)), 1)

    def test_same_named_files_are_all_kept(self):
        created = self._create()
        response = self.client.post(
            f"/investigations/{created['id']}/media",
            files=[("files", ("foto.jpg", f"foto-{n}".encode(), "image/jpeg")) for n in range(30)],
        )
        self.assertEqual(response.status_code, 200, response.text)
        urls = response.json()["media_urls"]
        self.assertEqual(len(urls), 30)
        self.assertEqual(len(set(urls)), 30)
        self.assertEqual(len(self.storage.keys(settings.INVESTIGATION_MEDIA_BUCKET)), 30)

    def test_database_failure_uses_error_envelope(self):
        created = self._create()
        failure = OperationalError("SELECT", {}, Exception("database is locked"))
        with patch("sqlalchemy.orm.Session.query", side_effect=failure):
            response = self.client.get(f"/investigations/{created['id']}")
        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json(), {"success": False, "error": "database is locked"})

    def test_oversized_upload_is_rejected(self):
        created = self._create()
        with patch.object(settings, "MAX_FILE_SIZE", 4):
            response = self.client.post(
                f"/investigations/{created['id']}/media",
                files=[("files", ("big.jpg", b"too-big", "image/jpeg"))],
            )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.storage.keys(settings.INVESTIGATION_MEDIA_BUCKET), [])

    def test_delete_removes_media(self):
        created = self._create()
        self.client.post(
            f"/investigations/{created['id']}/media",
            files=[("files", ("a.jpg", b"a", "image/jpeg"))],
        )
        response = self.client.delete(f"/investigations/{created['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["success"])
        self.assertEqual(self.storage.keys(settings.INVESTIGATION_MEDIA_BUCKET), [])
        self.assertEqual(self.client.get(f"/investigations/{created['id']}").status_code, 404)


if __name__ == "__main__":
    unittest.main()
