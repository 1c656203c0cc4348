import unittest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from config import settings
from models import InvestigationStatus
from services.database_service import InvestigationService, SuspiciousVehicleService
from services.errors import DatabaseError, RecordNotFoundError, StorageError
from services.storage import InMemoryStorageClient, MediaFile
from tests.support import make_session_factory

MEDIA = settings.INVESTIGATION_MEDIA_BUCKET
PHOTOS = settings.SUSPICIOUS_VEHICLE_PHOTOS_BUCKET


def _db_failure(message):
    return OperationalError("SQL", {}, Exception(message))


class InvestigationServiceTests(unittest.TestCase):
    def setUp(self):
        self.db = make_session_factory()()
        self.storage = InMemoryStorageClient()

    def tearDown(self):
        self.db.close()

    def _create(self, title="Furto no Centro"):
        return InvestigationService.create(self.db, title=title, assigned_investigator="Silva")

    def test_create_assigns_sequential_ro_numbers(self):
        first = self._create()
        second = self._create("Roubo de carga")

        self.assertEqual(first.ro_number, "1.0")
        self.assertEqual(second.ro_number, "2.0")
        self.assertEqual(first.status, InvestigationStatus.OPEN)
        self.assertEqual(first.description, "")
        self.assertEqual(first.media_urls, [])
        self.assertEqual(len(first.id), 36)

    def test_get_all_newest_first(self):
        first = self._create()
        second = self._create("Roubo de carga")
        self.assertEqual([i.id for i in InvestigationService.get_all(self.db)], [second.id, first.id])

    def test_get_missing(self):
        with self.assertRaises(RecordNotFoundError):
            InvestigationService.get_by_id(self.db, "missing")

    def test_update_changes_only_given_fields(self):
        investigation = self._create()
        updated = InvestigationService.update(
            self.db, investigation.id,
            {"status": "Em Andamento", "ro_number": "99.0", "created_at": None}
        )
        self.assertEqual(updated.status, InvestigationStatus.IN_PROGRESS)
        self.assertEqual(updated.title, "Furto no Centro")
        self.assertEqual(updated.ro_number, "1.0")
        self.assertIsNotNone(updated.created_at)

    def test_empty_update_returns_current_record(self):
        investigation = self._create()
        self.assertEqual(InvestigationService.update(self.db, investigation.id, {}).id, investigation.id)

    def test_update_missing(self):
        with self.assertRaises(RecordNotFoundError) as ctx:
            InvestigationService.update(self.db, "missing", {"title": "x"})
        self.assertIn("not found for update", ctx.exception.message)

    def test_media_lifecycle(self):
        investigation = self._create()
        InvestigationService.add_media(
            self.db, self.storage, investigation.id,
            [MediaFile("a.jpg", b"a", "image/jpeg"), MediaFile("b.jpg", b"b", "image/jpeg")]
        )
        self.assertEqual(len(investigation.media_urls), 2)
        self.assertEqual(len(self.storage.keys(MEDIA)), 2)
        self.assertTrue(all(k.startswith(f"{investigation.id}/") for k in self.storage.keys(MEDIA)))

        removed = investigation.media_urls[0]
        InvestigationService.remove_media(self.db, self.storage, investigation.id, removed)
        self.assertNotIn(removed, investigation.media_urls)
        self.assertEqual(len(self.storage.keys(MEDIA)), 1)

    def test_remove_unattached_media(self):
        investigation = self._create()
        with self.assertRaises(RecordNotFoundError):
            InvestigationService.remove_media(
                self.db, self.storage, investigation.id, "https://storage.test/x/investigationmedia/a.jpg"
            )

    def test_delete_tolerates_missing_media(self):
        investigation = self._create()
        InvestigationService.add_media(
            self.db, self.storage, investigation.id, [MediaFile("a.jpg", b"a", "image/jpeg")]
        )
        self.storage.objects[MEDIA].clear()

        InvestigationService.delete(self.db, self.storage, investigation.id)
        self.assertEqual(InvestigationService.get_all(self.db), [])

    def test_failed_commit_rolls_back(self):
        with patch.object(self.db, "commit", side_effect=_db_failure("disk I/O error")):
            with self.assertRaises(DatabaseError) as ctx:
                self._create()
        self.assertEqual(ctx.exception.message, "disk I/O error")
        self.assertEqual(ctx.exception.status_code, 502)
        self.assertEqual(InvestigationService.get_all(self.db), [])

    def test_failed_commit_removes_uploaded_media(self):
        investigation = self._create()
        with patch.object(self.db, "commit", side_effect=_db_failure("database is locked")):
            with self.assertRaises(DatabaseError):
                InvestigationService.add_media(
                    self.db, self.storage, investigation.id,
                    [MediaFile("a.jpg", b"a", "image/jpeg"), MediaFile("b.jpg", b"b", "image/jpeg")]
                )

        self.assertEqual(self.storage.keys(MEDIA), [])
        self.assertEqual(InvestigationService.get_by_id(self.db, investigation.id).media_urls, [])

    def test_lookup_failures_become_database_errors(self):
        investigation = self._create()
        with patch.object(self.db, "query", side_effect=_db_failure("database is locked")):
            with self.assertRaises(DatabaseError) as ctx:
                InvestigationService.get_by_id(self.db, investigation.id)
            self.assertEqual(ctx.exception.message, "database is locked")
            with self.assertRaises(DatabaseError):
                InvestigationService.update(self.db, investigation.id, {"title": "x"})


class SuspiciousVehicleServiceTests(unittest.TestCase):
    def setUp(self):
        self.db = make_session_factory()()
        self.storage = InMemoryStorageClient()

    def tearDown(self):
        self.db.close()

    def _create(self):
        return SuspiciousVehicleService.create(
            self.db, vehicle_model="Honda Civic Preto", license_plate=" bra2e19 "
        )

    def test_create_uppercases_plate(self):
        vehicle = self._create()
        self.assertEqual(vehicle.license_plate, "BRA2E19")
        self.assertIsNone(vehicle.photo_url)

    def test_update_normalizes_plate_and_ignores_photo(self):
        vehicle = self._create()
        updated = SuspiciousVehicleService.update(
            self.db, vehicle.id, {"license_plate": "abc1d23", "photo_url": "https://evil/x.jpg"}
        )
        self.assertEqual(updated.license_plate, "ABC1D23")
        self.assertIsNone(updated.photo_url)

    def test_replacing_photo_deletes_previous_one(self):
        vehicle = self._create()
        SuspiciousVehicleService.set_photo(self.db, self.storage, vehicle.id, MediaFile("a.jpg", b"a"))
        first_url = vehicle.photo_url
        SuspiciousVehicleService.set_photo(self.db, self.storage, vehicle.id, MediaFile("b.jpg", b"b"))

        self.assertNotEqual(vehicle.photo_url, first_url)
        keys = self.storage.keys(PHOTOS)
        self.assertEqual(len(keys), 1)
        self.assertTrue(keys[0].endswith("_b.jpg"))

    def test_remove_photo(self):
        vehicle = self._create()
        SuspiciousVehicleService.set_photo(self.db, self.storage, vehicle.id, MediaFile("a.jpg", b"a"))
        SuspiciousVehicleService.remove_photo(self.db, self.storage, vehicle.id)

        self.assertIsNone(vehicle.photo_url)
        self.assertEqual(self.storage.keys(PHOTOS), [])
        with self.assertRaises(RecordNotFoundError):
            SuspiciousVehicleService.remove_photo(self.db, self.storage, vehicle.id)

    def test_remove_photo_with_foreign_url(self):
        vehicle = self._create()
        vehicle.photo_url = "https://elsewhere.test/images/a.jpg"
        self.db.commit()
        with self.assertRaises(StorageError):
            SuspiciousVehicleService.remove_photo(self.db, self.storage, vehicle.id)

    def test_delete_removes_photo(self):
        vehicle = self._create()
        SuspiciousVehicleService.set_photo(self.db, self.storage, vehicle.id, MediaFile("a.jpg", b"a"))
        SuspiciousVehicleService.delete(self.db, self.storage, vehicle.id)

        self.assertEqual(self.storage.keys(PHOTOS), [])
        with self.assertRaises(RecordNotFoundError):
            SuspiciousVehicleService.get_by_id(self.db, vehicle.id)

    def test_failed_commit_keeps_previous_photo(self):
        vehicle = self._create()
        SuspiciousVehicleService.set_photo(self.db, self.storage, vehicle.id, MediaFile("a.jpg", b"a"))
        first_url = vehicle.photo_url

        with patch.object(self.db, "commit", side_effect=_db_failure("database is locked")):
            with self.assertRaises(DatabaseError):
                SuspiciousVehicleService.set_photo(
                    self.db, self.storage, vehicle.id, MediaFile("b.jpg", b"b")
                )

        self.assertEqual(vehicle.photo_url, first_url)
        keys = self.storage.keys(PHOTOS)
        self.assertEqual(len(keys), 1)
        self.assertTrue(keys[0].endswith("_a.jpg"))

    def test_lookup_failures_become_database_errors(self):
        vehicle = self._create()
        with patch.object(self.db, "query", side_effect=_db_failure("database is locked")):
            with self.assertRaises(DatabaseError):
                SuspiciousVehicleService.get_by_id(self.db, vehicle.id)
            with self.assertRaises(DatabaseError):
                SuspiciousVehicleService.update(self.db, vehicle.id, {"notes": "x"})


if __name__ == "__main__":
    unittest.main()
