"""Tests for translating evdev input into brush strokes."""

import pytest

evdev = pytest.importorskip("evdev")
from evdev import AbsInfo, ecodes

from pressure_ink.core.brush import PressureBrush
from pressure_ink.core.listener import InkListener
from pressure_ink.device.device_manager import DeviceManager


class FakeEvent:
    def __init__(self, type, code, value, sec):
        self.type = type
        self.code = code
        self.value = value
        self.sec = sec

    def timestamp(self):
        return self.sec


class FakeDevice:
    name = "Fake Pen Tablet"

    def __init__(self, caps):
        self.caps = caps

    def capabilities(self):
        return self.caps


def batch(sec, *items):
    events = [FakeEvent(type, code, value, sec) for type, code, value in items]
    events.append(FakeEvent(ecodes.EV_SYN, ecodes.SYN_REPORT, 0, sec))
    return events


def make_listener(info):
    outlines = []
    listener = InkListener(brush=PressureBrush(), on_outline=outlines.append)
    listener.configure(info)
    return listener, outlines


PEN_INFO = {
    'max_x': 1000,
    'max_y': 1000,
    'pressure_code': ecodes.ABS_PRESSURE,
    'max_pressure': 1000,
    'is_pen': True
}


def test_pen_stroke_reaches_brush_with_pressure():
    listener, outlines = make_listener(PEN_INFO)

    listener._process_event_batch(batch(
        1.000,
        (ecodes.EV_KEY, ecodes.BTN_TOOL_PEN, 1),
        (ecodes.EV_KEY, ecodes.BTN_TOUCH, 1),
        (ecodes.EV_ABS, ecodes.ABS_X, 100),
        (ecodes.EV_ABS, ecodes.ABS_Y, 200),
        (ecodes.EV_ABS, ecodes.ABS_PRESSURE, 500),
    ))
    assert listener.brush.is_drawing

    listener._process_event_batch(batch(
        1.016,
        (ecodes.EV_ABS, ecodes.ABS_X, 140),
        (ecodes.EV_ABS, ecodes.ABS_PRESSURE, 800),
    ))
    listener._process_event_batch(batch(1.032, (ecodes.EV_ABS, ecodes.ABS_X, 180)))

    samples = listener.brush.samples
    assert [s.pressure for s in samples] == pytest.approx([0.5, 0.8, 0.8])
    assert [s.x for s in samples] == [100, 140, 180]
    assert samples[1].time - samples[0].time == pytest.approx(16)

    listener._process_event_batch(batch(1.048, (ecodes.EV_KEY, ecodes.BTN_TOUCH, 0)))
    assert not listener.brush.is_drawing
    assert len(outlines) == 1
    assert outlines[0].is_closed


def test_device_without_pressure_estimates_from_motion():
    info = dict(PEN_INFO, pressure_code=None, max_pressure=0, is_pen=False)
    listener, _ = make_listener(info)
    listener._process_event_batch(batch(
        2.0,
        (ecodes.EV_ABS, ecodes.ABS_MT_TRACKING_ID, 7),
        (ecodes.EV_ABS, ecodes.ABS_MT_POSITION_X, 10),
        (ecodes.EV_ABS, ecodes.ABS_MT_POSITION_Y, 10),
    ))
    event = listener._make_event(2000.0)
    assert event.pointer_type == "touch"
    assert event.pressure is None
    assert listener.brush.samples[0].pressure == 0.5


def test_device_manager_reads_axis_ranges():
    caps = {
        ecodes.EV_ABS: [
            (ecodes.ABS_X, AbsInfo(0, 0, 21599, 0, 0, 100)),
            (ecodes.ABS_Y, AbsInfo(0, 0, 13499, 0, 0, 100)),
            (ecodes.ABS_PRESSURE, AbsInfo(0, 0, 8191, 0, 0, 0)),
        ],
        ecodes.EV_KEY: [ecodes.BTN_TOUCH, ecodes.BTN_TOOL_PEN],
    }
    manager = DeviceManager()
    assert manager.configure(FakeDevice(caps))
    info = manager.get_device_info()
    assert (info['max_x'], info['max_y']) == (21600, 13500)
    assert info['pressure_code'] == ecodes.ABS_PRESSURE
    assert info['max_pressure'] == 8191
    assert info['is_pen']


def test_device_manager_skips_devices_without_position():
    manager = DeviceManager()
    assert not manager.configure(FakeDevice({ecodes.EV_KEY: [ecodes.BTN_LEFT]}))
    assert manager.device is None
