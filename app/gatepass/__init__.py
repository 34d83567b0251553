"""gatepass - Remove the macOS quarantine attribute from files and folders."""

__version__ = "0.1.0"
