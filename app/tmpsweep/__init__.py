"""tmpsweep - Sweep disposable build and test artifacts out of a temp directory."""

__version__ = "0.1.0"
