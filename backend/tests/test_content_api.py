import unittest
from unittest.mock import patch

from services.content import list_pages
from services.storage import InMemoryStorageClient
from tests.support import clear_overrides, make_client, make_session_factory


class ContentAndHealthApiTests(unittest.TestCase):
    def setUp(self):
        self.session_factory = make_session_factory()
        self.storage = InMemoryStorageClient()
        self.client = make_client(self.session_factory, self.storage)

    def tearDown(self):
        clear_overrides()

    def test_lists_pages(self):
        response = self.client.get("/content/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            ["home", "about", "history", "hierarchy", "recruitment", "stolen-vehicles"],
        )

    def test_every_page_has_a_title(self):
        for slug in list_pages():
            response = self.client.get(f"/content/{slug}")
            self.assertEqual(response.status_code, 200, slug)
            self.assertTrue(response.json()["title"], slug)

    def test_unknown_page(self):
        self.assertEqual(self.client.get("/content/contato").status_code, 404)

    def test_root(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "running")

    def test_health(self):
        with patch("main.SessionLocal", self.session_factory), \
                patch("main.get_storage_client", lambda: self.storage):
            response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")
        self.assertEqual(response.json()["services"], {"database": "healthy", "storage": "healthy"})


if __name__ == "__main__":
    unittest.main()
