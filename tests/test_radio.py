import pytest

from groundcontrol.enums import EventType
from groundcontrol.packets import EventPacket, ManualPacket, pipe_for
from groundcontrol.radio import (
    LOG_PIPE,
    MAIN_PIPE,
    PIPES,
    TX_QUEUE,
    pipe_address,
    send_to_plane,
)
from groundcontrol.workqueue import WorkQueue


def test_send_to_plane_enqueues_on_given_queue():
    queue = WorkQueue(10)
    packet = EventPacket("e", EventType.PAIR_ATC_REQUEST)
    send_to_plane(packet, queue)
    assert len(queue) == 1
    assert queue.get() is packet


def test_send_to_plane_preserves_order():
    queue = WorkQueue(10)
    first = ManualPacket("m", 1, 2, 3, 4, 5)
    second = EventPacket("e", EventType.CONTROL_MODE_CHANGE_MANUAL)
    send_to_plane(first, queue)
    send_to_plane(second, queue)
    assert [queue.get(), queue.get()] == [first, second]


def test_send_to_plane_defaults_to_shared_queue():
    before = len(TX_QUEUE)
    packet = EventPacket("e", EventType.SYSTEM_STARTUP)
    send_to_plane(packet)
    assert len(TX_QUEUE) == before + 1
    drained = [TX_QUEUE.get() for _ in range(before + 1)]
    assert drained[-1] is packet


def test_main_pipe_address():
    assert pipe_address(MAIN_PIPE) == 0x7878787878


def test_log_pipe_address():
    assert pipe_address(LOG_PIPE) == 0xB3B4B5B605


def test_every_pipe_has_distinct_address():
    addresses = [pipe_address(pipe) for pipe in range(len(PIPES))]
    assert len(set(addresses)) == len(PIPES)
    assert all(address < 2**40 for address in addresses)


def test_packet_pipe_resolves_to_address():
    packet = EventPacket("e", EventType.SYSTEM_STARTUP)
    assert pipe_address(pipe_for(packet)) == PIPES[MAIN_PIPE]


@pytest.mark.parametrize("pipe", [-1, len(PIPES)])
def test_out_of_range_pipe_rejected(pipe):
    with pytest.raises(ValueError):
        pipe_address(pipe)


def test_non_int_pipe_rejected():
    with pytest.raises(TypeError):
        pipe_address("0")