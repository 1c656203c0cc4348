import unittest
from datetime import datetime, timezone

from utils.filenames import build_object_path, sanitize_filename


class SanitizeFilenameTests(unittest.TestCase):
    def test_strips_accents_and_replaces_spaces(self):
        self.assertEqual(sanitize_filename("Foto Câmera 1.jpg"), "Foto_Camera_1.jpg")

    def test_keeps_safe_characters(self):
        self.assertEqual(sanitize_filename("report-2025_v1.2.pdf"), "report-2025_v1.2.pdf")

    def test_replaces_path_separators(self):
        self.assertEqual(sanitize_filename("../etc/passwd"), ".._etc_passwd")

    def test_empty_name_falls_back(self):
        self.assertEqual(sanitize_filename(""), "file")


class BuildObjectPathTests(unittest.TestCase):
    def test_prefixes_record_id_and_timestamp(self):
        now = datetime(2025, 3, 15, 12, 0, 0, tzinfo=timezone.utc)
        path = build_object_path("abc-123", "ocorrência.png", now)
        self.assertEqual(path, f"abc-123/{int(now.timestamp() * 1000)}_ocorrencia.png")

    def test_sequence_goes_after_timestamp(self):
        now = datetime(2025, 3, 15, 12, 0, 0, tzinfo=timezone.utc)
        ms = int(now.timestamp() * 1000)
        self.assertEqual(build_object_path("abc-123", "foto.jpg", now, 2), f"abc-123/{ms}_2_foto.jpg")


if __name__ == "__main__":
    unittest.main()
