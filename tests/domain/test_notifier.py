"""Tests for the Notifier facade."""

import pytest

from telenotify.domain.cancel import CancelToken
from telenotify.domain.errors import Cancelled, SendFailure, TransportError
from telenotify.domain.message import ParseMode
from telenotify.domain.notifier import Notifier
from telenotify.ports.inbound import Author, Update
from telenotify.ports.outbound import ConnectionPort


class FakeConnection:
    def __init__(self, batches=(), fail_on=()):
        self._batches = list(batches)
        self._fail_on = set(fail_on)
        self.sent = []

    async def get_updates(self, timeout):
        return self._batches.pop(0) if self._batches else []

    async def send_message(self, chat_id, text, parse_mode):
        if chat_id in self._fail_on:
            raise TransportError("blocked by user")
        self.sent.append((chat_id, text, parse_mode))


class TestReceivers:
    def test_initial_receivers(self):
        n = Notifier(FakeConnection(), [1, 2])
        assert n.receivers == (1, 2)

    def test_add_preserves_order_and_duplicates(self):
        n = Notifier(FakeConnection(), [1])
        n.add_receivers(3, 2)
        n.add_receivers(1)
        assert n.receivers == (1, 3, 2, 1)

    def test_receivers_is_a_snapshot(self):
        n = Notifier(FakeConnection(), [1])
        snapshot = n.receivers
        n.add_receivers(2)
        assert snapshot == (1,)

    def test_rejects_non_int(self):
        n = Notifier(FakeConnection())
        with pytest.raises(TypeError):
            n.add_receivers("123")
        with pytest.raises(TypeError):
            n.add_receivers(True)
        assert n.receivers == ()

    def test_client_is_the_connection(self):
        conn = FakeConnection()
        assert Notifier(conn).client is conn

    def test_fake_matches_port(self):
        assert isinstance(FakeConnection(), ConnectionPort)


class TestSend:
    @pytest.mark.asyncio
    async def test_send_to_all(self):
        conn = FakeConnection()
        n = Notifier(conn, [10, 20])
        await n.send("Title", "body")
        assert conn.sent == [
            (10, "Title\nbody", ParseMode.HTML),
            (20, "Title\nbody", ParseMode.HTML),
        ]

    @pytest.mark.asyncio
    async def test_send_failure_identifies_chat(self):
        conn = FakeConnection(fail_on={20})
        n = Notifier(conn, [10, 20, 30])
        with pytest.raises(SendFailure) as exc_info:
            await n.send("Title", "body")
        assert exc_info.value.chat_id == 20
        assert [s[0] for s in conn.sent] == [10]

    @pytest.mark.asyncio
    async def test_send_cancelled(self):
        conn = FakeConnection()
        n = Notifier(conn, [10])
        token = CancelToken()
        token.cancel()
        with pytest.raises(Cancelled):
            await n.send("Title", "body", token=token)
        assert conn.sent == []

    @pytest.mark.asyncio
    async def test_parse_mode_option(self):
        conn = FakeConnection()
        n = Notifier(conn, [10], parse_mode=ParseMode.MARKDOWN)
        await n.send("a", "b")
        assert conn.sent[0][2] == ParseMode.MARKDOWN


class TestGetChatId:
    @pytest.mark.asyncio
    async def test_resolves_username(self):
        batch = [Update(update_id=1, author=Author(id=555, username="dana"))]
        n = Notifier(FakeConnection([[], batch]), poll_interval=0.01)
        assert await n.get_chat_id("dana", timeout=2.0) == 555
