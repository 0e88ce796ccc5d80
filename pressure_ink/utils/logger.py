"""
Logging utilities for ink strokes.
"""

import datetime
import logging
from typing import List, Optional

from .geometry import Sample

logger = logging.getLogger(__name__)


class StrokeLogger:
    """Handles logging of stroke lifecycle events."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file: {e}")

    def _timestamp(self) -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def _write_debug(self, message: str):
        if self.debug_file:
            self.debug_file.write(f"[{self._timestamp()}] {message}\n")
            self.debug_file.flush()

    def log_stroke_start(self, sample: Sample, pointer_kind: str):
        """Log the first sample of a stroke."""
        print(f"[{self._timestamp()}] 🖊️ STROKE START: {pointer_kind} at ({int(sample.x)}, {int(sample.y)})")
        self._write_debug(f"start {pointer_kind} {sample}")

    def log_stroke_end(self, samples: List[Sample], command_count: int):
        """Log a finished stroke and the size of its outline."""
        timestamp = self._timestamp()
        if not samples:
            print(f"[{timestamp}] ✋ STROKE END: no samples")
            return

        duration = samples[-1].time - samples[0].time
        pressures = [s.pressure for s in samples]
        print(f"[{timestamp}] ✋ STROKE END: {len(samples)} samples in {duration:.0f}ms")
        print(f"   Live pressure: {min(pressures):.2f} - {max(pressures):.2f}")
        if command_count:
            print(f"   Outline: {command_count} path commands")
        else:
            print("   Outline: degenerate stroke, nothing to fill")

        self._write_debug(f"end samples={len(samples)} commands={command_count}")
        for sample in samples:
            self._write_debug(f"   {sample}")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
