"""Bundled data files for gatepass."""
