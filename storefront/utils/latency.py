import time


class SimulatedLatency:
    """Stand-in for network round trips to a backing service.

    Each service call passes its nominal delay in milliseconds; the configured
    scale stretches or disables it (0 disables, 1 is the nominal delay).
    """

    def __init__(self, scale: float = 0.0, sleep=time.sleep):
        self.scale = float(scale or 0)
        self._sleep = sleep

    def __call__(self, ms: int) -> None:
        if self.scale > 0:
            self._sleep(ms * self.scale / 1000.0)


no_latency = SimulatedLatency(0)
