"""Tests for QueuedFileSelector."""

from __future__ import annotations

import asyncio

import pytest

from mediadesk.editor import FileSelector, QueuedFileSelector
from mediadesk.errors import MediaDeskSelectionError
from mediadesk.models import ImageFile


class TestQueuedFileSelector:
    def test_satisfies_protocol(self):
        assert isinstance(QueuedFileSelector(), FileSelector)

    async def test_offer_resolves_selection(self):
        selector = QueuedFileSelector()
        task = asyncio.create_task(selector.select("image/png"))
        await asyncio.sleep(0)
        assert selector.is_open
        assert selector.accept == "image/png"

        file = ImageFile("a.png", "image/png", b"a")
        assert selector.offer(file) is True
        assert await task == file
        assert selector.is_open is False
        assert selector.accept is None

    async def test_cancel_resolves_none(self):
        selector = QueuedFileSelector()
        task = asyncio.create_task(selector.select())
        await asyncio.sleep(0)
        assert selector.cancel() is True
        assert await task is None

    def test_answer_without_open_selection(self):
        selector = QueuedFileSelector()
        assert selector.offer(ImageFile("a.png", "image/png")) is False
        assert selector.cancel() is False

    async def test_second_open_selection_rejected(self):
        selector = QueuedFileSelector()
        task = asyncio.create_task(selector.select())
        await asyncio.sleep(0)

        with pytest.raises(MediaDeskSelectionError):
            await selector.select()

        selector.cancel()
        await task

    async def test_cancelled_waiter_releases_selection(self):
        selector = QueuedFileSelector()
        task = asyncio.create_task(selector.select())
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert selector.is_open is False
        assert selector.offer(ImageFile("a.png", "image/png")) is False
