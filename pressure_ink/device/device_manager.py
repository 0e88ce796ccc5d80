"""
Device management for pen tablet and touchscreen discovery.
"""

import evdev
from evdev import ecodes
import logging

logger = logging.getLogger(__name__)


class DeviceManager:
    """Finds an absolute-positioning input device and records its axis ranges."""

    def __init__(self):
        self.device = None
        self.max_x = 1920  # Default
        self.max_y = 1080  # Default
        self.pressure_code = None
        self.max_pressure = 0
        self.is_pen = False

    def find_device(self):
        """Find and configure a pen tablet or touchscreen."""
        devices = [evdev.InputDevice(path) for path in evdev.list_devices()]

        # Prefer pens, they report real pressure
        candidates = sorted(devices, key=lambda d: not self._has_pen(d.capabilities()))
        for device in candidates:
            if self.configure(device):
                logger.info(f"Found input device: {device.name}")
                logger.info(f"Axis range: {self.max_x}x{self.max_y}, "
                            f"pressure max: {self.max_pressure or 'none'}")
                return device

        logger.error("No pen tablet or touchscreen found")
        return None

    def configure(self, device) -> bool:
        """Read axis ranges from a device; False if it has no position axes."""
        caps = device.capabilities()
        if ecodes.EV_ABS not in caps:
            return False

        abs_info = {code: info for code, info in caps.get(ecodes.EV_ABS, [])}
        if ecodes.ABS_X not in abs_info or ecodes.ABS_Y not in abs_info:
            return False

        self.max_x = abs_info[ecodes.ABS_X].max + 1
        self.max_y = abs_info[ecodes.ABS_Y].max + 1

        self.pressure_code = None
        self.max_pressure = 0
        for code in (ecodes.ABS_PRESSURE, ecodes.ABS_MT_PRESSURE):
            if code in abs_info and abs_info[code].max > 0:
                self.pressure_code = code
                self.max_pressure = abs_info[code].max
                break

        self.is_pen = self._has_pen(caps)
        self.device = device
        return True

    @staticmethod
    def _has_pen(caps) -> bool:
        return ecodes.BTN_TOOL_PEN in caps.get(ecodes.EV_KEY, [])

    def get_device_info(self):
        """Get device and axis information."""
        return {
            'device': self.device,
            'max_x': self.max_x,
            'max_y': self.max_y,
            'pressure_code': self.pressure_code,
            'max_pressure': self.max_pressure,
            'is_pen': self.is_pen
        }
