import threading
import time

import pytest

from softraster.bounded_buffer import BoundedBuffer


def test_fifo_order():
    buf = BoundedBuffer()
    for item in ("a", "b", "c"):
        buf.add(item)
    assert [buf.remove() for _ in range(3)] == ["a", "b", "c"]
    assert len(buf) == 0


def test_default_capacity_blocks_producer():
    buf = BoundedBuffer()
    for i in range(buf.capacity):
        buf.add(i)
    done = threading.Event()

    def producer():
        buf.add("extra")
        done.set()

    thread = threading.Thread(target=producer, daemon=True)
    thread.start()
    assert not done.wait(0.1)
    assert buf.remove() == 0
    thread.join(2.0)
    assert done.is_set()
    assert len(buf) == buf.capacity


def test_remove_blocks_until_item_arrives():
    buf = BoundedBuffer(2)
    received = []
    finished = threading.Event()

    def consumer():
        received.append(buf.remove())
        finished.set()

    thread = threading.Thread(target=consumer, daemon=True)
    thread.start()
    assert not finished.wait(0.05)
    assert len(buf) == 0
    buf.add("item")
    thread.join(2.0)
    assert finished.is_set()
    assert received == ["item"]
    assert len(buf) == 0
    buf.add("next")
    assert buf.remove() == "next"


def test_wait_until_empty():
    buf = BoundedBuffer(5)
    for i in range(3):
        buf.add(i)
    taken = []

    def consumer():
        for _ in range(3):
            time.sleep(0.01)
            taken.append(buf.remove())

    thread = threading.Thread(target=consumer, daemon=True)
    thread.start()
    buf.wait_until_empty()
    thread.join(2.0)
    assert len(buf) == 0
    assert taken == [0, 1, 2]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedBuffer(0)