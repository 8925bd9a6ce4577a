"""Tests for the featured-image slot and picker."""

from __future__ import annotations

import asyncio

import pytest

from mediadesk.editor import FeaturedImagePicker, FeaturedImageSlot, QueuedFileSelector
from mediadesk.models import UploadFailure, UploadSuccess

# =========================================================================
# FeaturedImageSlot
# =========================================================================


class TestFeaturedImageSlot:
    def test_starts_empty(self, state):
        slot = FeaturedImageSlot(state)
        assert slot.is_empty
        assert slot.url is None

    def test_set_overwrites(self, state):
        slot = FeaturedImageSlot(state)
        slot.set("https://cdn.test/a.png")
        slot.set("https://cdn.test/b.png")
        assert state.featured_image_url == "https://cdn.test/b.png"

    def test_set_rejects_empty(self, state):
        with pytest.raises(ValueError):
            FeaturedImageSlot(state).set("")

    def test_set_if_empty(self, state):
        slot = FeaturedImageSlot(state)
        assert slot.set_if_empty("https://cdn.test/a.png") is True
        assert slot.set_if_empty("https://cdn.test/b.png") is False
        assert slot.url == "https://cdn.test/a.png"

    def test_clear(self, state):
        slot = FeaturedImageSlot(state)
        slot.set("https://cdn.test/a.png")
        slot.clear()
        assert slot.is_empty
        assert slot.set_if_empty("https://cdn.test/b.png") is True


# =========================================================================
# FeaturedImagePicker
# =========================================================================


def _make_picker(coordinator, state):
    slot = FeaturedImageSlot(state)
    selector = QueuedFileSelector()
    return FeaturedImagePicker(coordinator, slot, selector), slot, selector


class TestFeaturedImagePicker:
    async def test_success_sets_slot(self, coordinator, state, make_image):
        picker, slot, _ = _make_picker(coordinator, state)
        outcome = await picker.upload(make_image())
        assert isinstance(outcome, UploadSuccess)
        assert slot.url == outcome.url

    async def test_success_overwrites_existing(self, coordinator, state, make_image):
        picker, slot, _ = _make_picker(coordinator, state)
        slot.set("https://cdn.test/old.png")
        outcome = await picker.upload(make_image())
        assert slot.url == outcome.url

    async def test_failure_keeps_existing(self, coordinator, store, state, make_image):
        picker, slot, _ = _make_picker(coordinator, state)
        slot.set("https://cdn.test/old.png")
        store.fail(b"photo.png", RuntimeError("rejected"))

        outcome = await picker.upload(make_image())
        assert isinstance(outcome, UploadFailure)
        assert slot.url == "https://cdn.test/old.png"
        assert state.last_error == "rejected"

    async def test_disabled_while_uploading(self, coordinator, store, state, make_image):
        picker, _, _ = _make_picker(coordinator, state)
        gate = store.hold(b"photo.png")
        assert picker.disabled is False

        task = asyncio.create_task(picker.upload(make_image()))
        await asyncio.sleep(0)
        assert picker.disabled is True

        gate.set()
        await task
        assert picker.disabled is False

    async def test_pick_uploads_selected_file(self, coordinator, state, store, make_image):
        picker, slot, selector = _make_picker(coordinator, state)
        task = asyncio.create_task(picker.pick())
        await asyncio.sleep(0)
        assert selector.accept == "image/*"

        selector.offer(make_image("cover.jpg", "image/jpeg"))
        outcome = await task
        assert isinstance(outcome, UploadSuccess)
        assert slot.url == outcome.url
        assert store.calls[0]["key"].endswith(".jpg")

    async def test_pick_cancelled(self, coordinator, state, store):
        picker, slot, selector = _make_picker(coordinator, state)
        task = asyncio.create_task(picker.pick())
        await asyncio.sleep(0)

        selector.cancel()
        assert await task is None
        assert store.calls == []
        assert slot.is_empty
        assert state.uploading is False

    async def test_stale_success_not_applied(self, coordinator, store, state, make_image):
        picker, slot, _ = _make_picker(coordinator, state)
        gate = store.hold(b"photo.png")
        task = asyncio.create_task(picker.upload(make_image()))
        await asyncio.sleep(0)

        state.generation += 1
        gate.set()
        outcome = await task
        assert isinstance(outcome, UploadSuccess)
        assert slot.is_empty
