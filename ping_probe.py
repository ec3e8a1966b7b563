import threading

import ping3

from presenter import Failure, FailureReason, Success


DEFAULT_HOST = "8.8.8.8"
DEFAULT_TIMEOUT = 0.5 # seconds
DEFAULT_INTERVAL = 1.0 # seconds


def probe_once(host, timeout=DEFAULT_TIMEOUT):
    """
    Sends a single echo request to host and maps the reply to a probe result.

    Args:
        host (str): The domain name or IP address to ping.
        timeout (float): Seconds to wait for the reply.

    Returns:
        Success with the round-trip time in whole milliseconds, or Failure.
        Exceptions raised by ping3 are left to the caller.
    """
    result_ms = ping3.ping(host, timeout=timeout, unit="ms")

    if result_ms is None: # ping3 signals a timeout with None
        return Failure(FailureReason.TIMEOUT)
    if isinstance(result_ms, bool) or not isinstance(result_ms, (int, float)):
        # False (unreachable / unknown host) or an unexpected type
        return Failure(FailureReason.FAILED)
    return Success(max(0, int(result_ms)))


class ProbeRunner(threading.Thread):
    """
    Background loop: probe, hand the result to the UI queue, wait, repeat.
    Never touches presentation state; the consumer of result_queue owns it.
    """

    def __init__(
        self, host, ping_timeout, interval, result_queue, stop_event=None, probe=probe_once
    ):
        print(f"[THREAD INIT] ProbeRunner for {host}")
        super().__init__(daemon=True)
        self.host = host
        self.ping_timeout = ping_timeout
        self.interval = interval
        self.result_queue = result_queue
        self.stop_event = stop_event or threading.Event()
        self.probe = probe
        self.cycles = 0

    def run_cycle(self):
        """Runs one probe and queues its outcome. Probe faults become Failure(ERROR)."""
        try:
            result = self.probe(self.host, self.ping_timeout)
        except Exception as e:
            print(f"[PING EXCEPTION] Host: {self.host}, Error: {e}")
            result = Failure(FailureReason.ERROR)
        else:
            if isinstance(result, Success):
                print(f"[PING RESULT] Host: {self.host}, Result: {result.latency_ms} ms")
            elif not isinstance(result, Failure): # Unexpected result type
                print(f"[PING UNEXPECTED] Host: {self.host}, Result: {result}")
                result = Failure(FailureReason.FAILED)
            elif result.reason is FailureReason.TIMEOUT:
                print(f"[PING TIMEOUT] Host: {self.host}")
            else:
                print(f"[PING FAIL] Host: {self.host}, Status: {result.reason.value}")

        self.cycles += 1
        self.result_queue.put(result)
        return result

    def run(self):
        print(f"[THREAD START] Pinging {self.host} every {self.interval}s")
        while not self.stop_event.is_set():
            self.run_cycle()
            # Delay applies after every outcome; a stop request cuts it short
            self.stop_event.wait(self.interval)
        print(f"[THREAD STOP] ProbeRunner for {self.host} stopped after {self.cycles} cycles")
