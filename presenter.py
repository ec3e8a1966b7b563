import threading
from dataclasses import dataclass
from enum import Enum


WHITE = (255, 255, 255)
MAX_COLOR_DECREASE = 127 # keeps red/green at 128 or above


class FailureReason(Enum):
    TIMEOUT = "timeout"
    FAILED = "failed" # unreachable, unknown host, or any other non-success reply
    ERROR = "error" # exception raised while probing


@dataclass(frozen=True)
class Success:
    latency_ms: int


@dataclass(frozen=True)
class Failure:
    reason: FailureReason


@dataclass(frozen=True)
class DisplayState:
    text: str = "NA"
    title: str = "NA"
    color_enabled: bool = False
    color: tuple = WHITE


def latency_color(latency_ms):
    """Fades from white toward blue as latency grows, saturating at (128, 128, 255)."""
    decrease = min(latency_ms * 2, MAX_COLOR_DECREASE)
    return (255 - decrease, 255 - decrease, 255)


def present(result, color_enabled):
    """Maps one probe outcome to the text, title and color shown on screen."""
    if isinstance(result, Success):
        text = str(result.latency_ms)
        color = latency_color(result.latency_ms) if color_enabled else WHITE
        return DisplayState(text=text, title=text + "ms", color_enabled=color_enabled, color=color)

    # Failures never get tinted
    return DisplayState(text="NA", title="NA", color_enabled=color_enabled, color=WHITE)


def describe(result, color_enabled=False):
    """Returns the log line for one probe outcome."""
    if isinstance(result, Success):
        if color_enabled:
            return f"Ping: {result.latency_ms}ms, Color RGB: {latency_color(result.latency_ms)}"
        return f"Ping: {result.latency_ms}ms"
    return f"Ping failed with status: {result.reason.value}"


class ColorToggle:
    """
    The color-changing flag, safe to flip from any thread.
    Backed by a threading.Event instead of a bare bool.
    """

    def __init__(self, enabled=False):
        self._event = threading.Event()
        if enabled:
            self._event.set()

    def is_enabled(self):
        return self._event.is_set()

    def enable(self):
        self._event.set()

    def disable(self):
        self._event.clear()

    def toggle(self):
        if self._event.is_set():
            self._event.clear()
        else:
            self._event.set()
        return self._event.is_set()
