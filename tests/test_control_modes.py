import pytest

from groundcontrol.control_modes import ControlModeDispatcher, manual_packet
from groundcontrol.enums import Button, ControlMode, ControllerInput, EventType
from groundcontrol.packets import EventData8Packet, EventPacket, ManualPacket, PacketType
from groundcontrol.session import Session
from groundcontrol.workqueue import WorkQueue


class RecordingLog:
    def __init__(self):
        self.events = []

    def insert_event(self, event_type, data=0, timestamp=None):
        self.events.append(event_type)
        return True


def drain(queue):
    items = []
    while not queue.empty():
        items.append(queue.get())
    return items


@pytest.fixture
def parts():
    session = Session()
    log = RecordingLog()
    queue = WorkQueue(100)
    return session, log, queue, ControlModeDispatcher(session, log, queue)


def test_manual_packet_centered_sticks():
    packet = manual_packet(ControllerInput())
    assert packet.type is PacketType.MANUAL
    assert packet.header == "m"
    assert (packet.throttle, packet.elevator, packet.rudder) == (0, 90, 90)
    assert (packet.left_aileron, packet.right_aileron) == (90, 90)


def test_manual_packet_full_deflection():
    packet = manual_packet(
        ControllerInput(raw_throttle=32767, raw_elevator=-32768, raw_rudder=32767, raw_right_y=32767 // 2)
    )
    assert packet.throttle == 180
    assert packet.elevator == 0
    assert packet.rudder == 180


def test_manual_packet_wraps_below_zero():
    packet = manual_packet(ControllerInput(raw_right_x=-32768, raw_right_y=-32768))
    assert packet.left_aileron == 166


def test_pairing_circle_switches_to_manual(parts):
    session, log, queue, dispatcher = parts
    assert dispatcher.process_event(Button.CIRCLE) is True
    assert session.control_mode is ControlMode.MANUAL
    assert log.events == [EventType.CONTROL_MODE_CHANGE_MANUAL]
    assert drain(queue) == [EventPacket("e", EventType.CONTROL_MODE_CHANGE_MANUAL)]


def test_pairing_ignores_empty_mask(parts):
    session, log, queue, dispatcher = parts
    assert dispatcher.process_event(0) is False
    assert session.control_mode is ControlMode.PAIRING
    assert queue.empty()
    assert log.events == []


def test_pairing_square_circle_combination_recognised(parts):
    session, log, queue, dispatcher = parts
    assert dispatcher.process_event(Button.SQUARE | Button.CIRCLE) is True
    assert session.control_mode is ControlMode.PAIRING
    assert queue.empty()


def test_manual_cross_switches_to_assist(parts):
    session, log, queue, dispatcher = parts
    session.control_mode = ControlMode.MANUAL
    assert dispatcher.process_event(Button.CROSS) is True
    assert session.control_mode is ControlMode.ASSIST
    assert drain(queue) == [EventPacket("e", EventType.CONTROL_MODE_CHANGE_ASSIST)]


def test_manual_circle_on_ground_sends_holding_parameters(parts):
    session, log, queue, dispatcher = parts
    session.control_mode = ControlMode.MANUAL
    assert dispatcher.process_event(Button.CIRCLE) is True
    assert session.control_mode is ControlMode.MANUAL
    assert drain(queue) == [
        EventPacket("e", EventType.CONTROL_MODE_CHANGE_HOLDING),
        EventData8Packet("e", EventType.FIXED_ALTITUDE_DATA_CHANGE, 40),
        EventData8Packet("e", EventType.FIXED_SPEED_DATA_CHANGE, 30),
    ]


def test_manual_unknown_and_pairing_only_combinations(parts):
    session, log, queue, dispatcher = parts
    session.control_mode = ControlMode.MANUAL
    assert dispatcher.process_event(Button.MUTE) is False
    assert dispatcher.process_event(0) is False
    assert dispatcher.process_event(Button.SQUARE | Button.CIRCLE) is False
    assert dispatcher.process_event(Button.SHARE | Button.OPTIONS) is True
    assert session.control_mode is ControlMode.MANUAL
    assert queue.empty()


@pytest.mark.parametrize(
    "mode",
    [ControlMode.AUTO, ControlMode.ASSIST, ControlMode.TAXI, ControlMode.HOLDING,
     ControlMode.EMERGENCY, ControlMode.RECOVERY],
)
def test_other_modes_ignore_buttons(parts, mode):
    session, log, queue, dispatcher = parts
    session.control_mode = mode
    assert dispatcher.process_event(Button.CIRCLE) is False
    assert session.control_mode is mode
    assert queue.empty()


def test_process_event_rejects_out_of_range_mask(parts):
    _, _, _, dispatcher = parts
    with pytest.raises(ValueError):
        dispatcher.process_event(-1)
    with pytest.raises(ValueError):
        dispatcher.process_event(1 << 32)


def test_process_features_in_manual_sends_packet(parts):
    session, log, queue, dispatcher = parts
    session.control_mode = ControlMode.MANUAL
    axes = ControllerInput(raw_throttle=1000, raw_elevator=-500, raw_rudder=2500)
    packet = dispatcher.process_features(axes)
    assert packet == manual_packet(axes)
    assert isinstance(packet, ManualPacket)
    assert drain(queue) == [packet]


@pytest.mark.parametrize(
    "mode", [ControlMode.PAIRING, ControlMode.ASSIST, ControlMode.TAXI, ControlMode.AUTO]
)
def test_process_features_other_modes_send_nothing(parts, mode):
    session, log, queue, dispatcher = parts
    session.control_mode = mode
    assert dispatcher.process_features(ControllerInput()) is None
    assert queue.empty()