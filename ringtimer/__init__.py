"""RingTimer — single countdown timer with a progress ring."""

__version__ = "0.1.0"
