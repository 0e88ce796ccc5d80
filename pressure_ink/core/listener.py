"""
Input listener that feeds pen tablet or touchscreen events to a pressure brush.
"""

import threading
import logging
from typing import Callable, Dict, Optional
from evdev import ecodes

from ..device.device_manager import DeviceManager
from ..outline.path_builder import OutlinePath
from ..utils.logger import StrokeLogger
from .brush import PressureBrush
from .events import PointerEvent

logger = logging.getLogger(__name__)


class InkListener:
    """Reads evdev events, turns them into pointer events and drives the brush."""

    def __init__(self, brush: Optional[PressureBrush] = None,
                 on_outline: Optional[Callable[[OutlinePath], None]] = None,
                 device_manager: Optional[DeviceManager] = None):
        self.device_manager = device_manager or DeviceManager()
        self.stroke_logger = None
        if brush is None:
            self.stroke_logger = StrokeLogger()
            brush = PressureBrush(stroke_logger=self.stroke_logger)
        self.brush = brush
        self.on_outline = on_outline
        self.device_info: Dict = {}

        # State management
        self.running = False
        self.pen_state = {
            'x': 0.0,
            'y': 0.0,
            'pressure': None,
            'touching': False,
            'pen_active': False
        }

        # Thread management
        self.thread = None
        self.state_lock = threading.Lock()

    def start(self) -> bool:
        """Start the listener."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No pen tablet or touchscreen found")
            return False

        self.configure(self.device_manager.get_device_info())
        self.running = True
        self._print_startup_info()

        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True

    def stop(self):
        """Stop the listener."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)
        if self.stroke_logger:
            self.stroke_logger.close()

    def configure(self, device_info: Dict):
        """Use the axis ranges of a discovered device."""
        self.device_info = device_info

    def _print_startup_info(self):
        """Print startup information."""
        info = self.device_info
        print(f"✅ Found: {self.device_manager.device.name}")
        print(f"📺 Axis range: {info['max_x']}x{info['max_y']}")
        if info['max_pressure']:
            print(f"🖊️ Pressure levels: {info['max_pressure'] + 1}")
        else:
            print("🖱️ No pressure axis, estimating pressure from speed")
        print(f"📏 Stroke width: {self.brush.settings.stroke_width}")
        print("🎯 Ready! Draw strokes to see their outlines.")

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        self._process_event_batch(event_batch)
                    event_batch = []

        except KeyboardInterrupt:
            pass
        except OSError as e:
            logger.error(f"Error in event loop: {e}")

    def _process_event_batch(self, event_batch):
        """Process a batch of events ending in SYN_REPORT."""
        if not event_batch:
            return

        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_abs_event(ev)
            elif ev.type == ecodes.EV_KEY:
                self._handle_key_event(ev)

        self._dispatch(event_batch[-1].timestamp() * 1000)

    def _handle_abs_event(self, ev):
        """Handle absolute axis events."""
        if ev.code in (ecodes.ABS_X, ecodes.ABS_MT_POSITION_X):
            self.pen_state['x'] = float(ev.value)
        elif ev.code in (ecodes.ABS_Y, ecodes.ABS_MT_POSITION_Y):
            self.pen_state['y'] = float(ev.value)
        elif ev.code == self.device_info.get('pressure_code'):
            self.pen_state['pressure'] = self._normalize_pressure(ev.value)
        elif ev.code == ecodes.ABS_MT_TRACKING_ID:
            self.pen_state['touching'] = ev.value != -1

    def _handle_key_event(self, ev):
        """Handle contact and tool buttons."""
        if ev.code == ecodes.BTN_TOUCH:
            self.pen_state['touching'] = ev.value != 0
        elif ev.code == ecodes.BTN_TOOL_PEN:
            self.pen_state['pen_active'] = ev.value != 0

    def _normalize_pressure(self, value: int) -> Optional[float]:
        max_pressure = self.device_info.get('max_pressure') or 0
        if max_pressure <= 0:
            return None
        return min(1.0, max(0.0, value / max_pressure))

    def _make_event(self, timestamp: float) -> PointerEvent:
        """Build a pointer event from the current pen state."""
        is_pen = self.pen_state['pen_active'] or self.device_info.get('is_pen', False)
        pressure = self.pen_state['pressure'] if self.device_info.get('max_pressure') else None
        return PointerEvent(
            x=self.pen_state['x'],
            y=self.pen_state['y'],
            timestamp=timestamp,
            pointer_type="pen" if is_pen else "touch",
            pressure=pressure
        )

    def _dispatch(self, timestamp: float):
        """Drive the brush from the contact state after a batch."""
        touching = self.pen_state['touching']

        if touching and not self.brush.is_drawing:
            self.brush.on_stroke_start(self._make_event(timestamp))
        elif touching:
            self.brush.on_stroke_move(self._make_event(timestamp))
        elif self.brush.is_drawing:
            path = self.brush.on_stroke_end()
            self.pen_state['pressure'] = None
            if self.on_outline and not path.is_empty:
                self.on_outline(path)
