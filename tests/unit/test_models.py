"""Tests for the public data models."""

from __future__ import annotations

from mediadesk.models import (
    EditorDraftState,
    ImageFile,
    UploadFailure,
    UploadRequest,
    UploadSuccess,
    UploadTarget,
)


class TestModels:
    def test_outcome_variants(self):
        assert UploadSuccess("https://cdn.test/a.png").ok is True
        assert UploadFailure("nope").ok is False

    def test_image_file(self):
        file = ImageFile("a.png", "IMAGE/PNG", b"1234")
        assert file.size == 4
        assert "1234" not in repr(file)

    def test_image_file_from_path(self, tmp_path):
        path = tmp_path / "shot.jpg"
        path.write_bytes(b"jpg")
        file = ImageFile.from_path(path)
        assert file.content_type == "image/jpeg"
        assert file.data == b"jpg"

    def test_requests_compare_by_identity(self):
        file = ImageFile("a.png", "image/png", b"a")
        first = UploadRequest(file, UploadTarget.INLINE)
        second = UploadRequest(file, UploadTarget.INLINE)
        assert first == first
        assert first != second
        assert len({first, second}) == 2

    def test_draft_defaults(self):
        state = EditorDraftState()
        assert state.featured_image_url is None
        assert state.uploading is False
        assert state.last_error is None
        assert state.generation == 0
