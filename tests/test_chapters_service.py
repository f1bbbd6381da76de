"""
Test per la decodifica dei capitoli in formato JSON di ffprobe
"""
import json
import os
import tempfile
import unittest

from dialog_extractor.core import Chapter
from dialog_extractor.services import chapters as chapters_svc
from dialog_extractor.services.errors import ChapterMetadataError


FFPROBE_JSON = {
    "streams": [],
    "chapters": [
        {
            "id": 0,
            "time_base": "1/1000000000",
            "start": 0,
            "start_time": "0.000000",
            "end": 89923000000,
            "end_time": "89.923000",
            "tags": {"title": "Opening"},
        },
        {
            "id": 1,
            "start_time": "89.923000",
            "end_time": "1300.000000",
        },
    ],
}


class TestParseChaptersJson(unittest.TestCase):

    def test_parse_chapters(self):
        chapters = chapters_svc.parse_chapters_json(json.dumps(FFPROBE_JSON))
        self.assertEqual(chapters, [
            Chapter("0.000000", "89.923000", "Opening"),
            Chapter("89.923000", "1300.000000", ""),
        ])

    def test_no_chapters(self):
        self.assertEqual(chapters_svc.parse_chapters_json('{"streams": []}'), [])
        self.assertEqual(chapters_svc.parse_chapters_json('{"chapters": null}'), [])

    def test_invalid_documents(self):
        for bad in ('not json', '[]', '{"chapters": {}}', '{"chapters": [{"start_time": "1.0"}]}'):
            with self.subTest(bad=bad):
                with self.assertRaises(ChapterMetadataError):
                    chapters_svc.parse_chapters_json(bad)

    def test_empty_chapters_object_is_rejected(self):
        """Un oggetto vuoto al posto della lista non vale come 'nessun capitolo'"""
        with self.assertLogs('dialog_extractor.services.chapters', level='ERROR') as captured:
            with self.assertRaises(ChapterMetadataError):
                chapters_svc.parse_chapters_json('{"chapters": {}}')
        self.assertIn("not a list", captured.output[0])

    def test_errors_are_logged_before_raising(self):
        for bad in ('not json', '[]', '{"chapters": [{"start_time": "1.0"}]}'):
            with self.subTest(bad=bad):
                with self.assertLogs('dialog_extractor.services.chapters', level='ERROR'):
                    with self.assertRaises(ChapterMetadataError):
                        chapters_svc.parse_chapters_json(bad)


class TestReadChapters(unittest.TestCase):

    def test_read_file(self):
        with tempfile.NamedTemporaryFile('w', suffix='.json', delete=False, encoding='utf-8') as f:
            json.dump(FFPROBE_JSON, f)
            path = f.name
        try:
            chapters = chapters_svc.read_chapters(path)
            self.assertEqual([c.title for c in chapters], ["Opening", ""])
        finally:
            os.unlink(path)


if __name__ == "__main__":
    unittest.main()
