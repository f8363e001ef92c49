import io
import os
import shutil
import tempfile
import unittest

from app import create_app


class TestUploadSystem(unittest.TestCase):
    def setUp(self):
        self.upload_dir = tempfile.mkdtemp()

        # Create a test Flask application
        self.app = create_app(
            {"TESTING": True, "UPLOAD_FOLDER": self.upload_dir}
        )

        # Create a test client
        self.client = self.app.test_client()

    def tearDown(self):
        shutil.rmtree(self.upload_dir, ignore_errors=True)

    def test_upload_file(self):
        response = self.client.post(
            "/api/upload",
            data={"file": (io.BytesIO(b"hello world"), "my holiday photo.png")},
            content_type="multipart/form-data",
        )
        self.assertEqual(response.status_code, 200)
        file_url = response.json["fileUrl"]
        self.assertTrue(file_url.startswith("/uploads/"))
        self.assertTrue(file_url.endswith("-my_holiday_photo.png"))
        self.assertNotIn(" ", file_url)

        # Verify the bytes landed in the uploads directory
        stored_name = file_url[len("/uploads/"):]
        with open(os.path.join(self.upload_dir, stored_name), "rb") as f:
            self.assertEqual(f.read(), b"hello world")

        # And are served back under the public prefix
        served = self.client.get(file_url)
        self.assertEqual(served.status_code, 200)
        self.assertEqual(served.data, b"hello world")
        served.close()

    def test_upload_same_name_twice_gets_distinct_urls(self):
        urls = set()
        for _ in range(2):
            response = self.client.post(
                "/api/upload",
                data={"file": (io.BytesIO(b"x"), "notes.txt")},
                content_type="multipart/form-data",
            )
            urls.add(response.json["fileUrl"])
        self.assertEqual(len(urls), 2)

    def test_upload_without_file(self):
        response = self.client.post(
            "/api/upload", data={}, content_type="multipart/form-data"
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json, {"error": "No file uploaded"})
        self.assertEqual(os.listdir(self.upload_dir), [])
        self.assertEqual(len(self.app.chat_state.chat_log), 0)

    def test_upload_wrong_field_name(self):
        response = self.client.post(
            "/api/upload",
            data={"attachment": (io.BytesIO(b"x"), "notes.txt")},
            content_type="multipart/form-data",
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.json)

    def test_upload_storage_failure(self):
        missing_dir = os.path.join(self.upload_dir, "missing", "nested")
        self.app.chat_state.upload_store.upload_dir = missing_dir

        response = self.client.post(
            "/api/upload",
            data={"file": (io.BytesIO(b"x"), "notes.txt")},
            content_type="multipart/form-data",
        )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json, {"error": "Upload failed"})
        self.assertNotIn(self.upload_dir, response.get_data(as_text=True))


if __name__ == "__main__":
    unittest.main()
