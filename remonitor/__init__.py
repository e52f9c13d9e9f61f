"""remonitor - remembers which monitor a window was last open on."""

__version__ = "0.1.0"
