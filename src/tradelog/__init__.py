"""tradelog: a personal trading journal with a pure analytics engine."""

__version__ = "0.1.0"
