"""Decode and write ALICE ITS readout data: RDH CRU headers, status words and data words."""

__version__ = "0.1.0"