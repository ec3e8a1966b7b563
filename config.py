import argparse

from ping_probe import DEFAULT_HOST, DEFAULT_INTERVAL, DEFAULT_TIMEOUT


class Config(argparse.ArgumentParser):
    """
    An ArgumentParser subclass to define configuration options for the latency readout.
    """

    def __init__(self):
        super().__init__(
            description="An always-visible readout of round-trip latency to a host.",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        )

        self.add_argument(
            "host",
            nargs="?",  # Makes the positional argument optional
            default=DEFAULT_HOST,
            metavar="HOST",
            help="The domain or IP address to ping.",
        )

        # Ping Timeout
        self.add_argument(
            "--ping-timeout",
            "-t",
            type=float,
            default=DEFAULT_TIMEOUT,
            metavar="SECONDS",
            help="Timeout for each ping in seconds.",
        )

        # Delay between pings
        self.add_argument(
            "--interval",
            "-i",
            type=float,
            default=DEFAULT_INTERVAL,
            metavar="SECONDS",
            help="Delay after each ping before the next one, in seconds.",
        )

        # Color-changing effect
        self.add_argument(
            "--color",
            "-c",
            action="store_true",
            help="Start with the latency color-changing effect enabled (toggle with 'c').",
        )

    def parse_args(self, args=None, namespace=None):
        parsed = super().parse_args(args, namespace)
        if not (0 < parsed.ping_timeout <= 10):
            self.error("--ping-timeout must be greater than 0 and at most 10 seconds")
        if parsed.interval <= 0:
            self.error("--interval must be greater than 0 seconds")
        return parsed
