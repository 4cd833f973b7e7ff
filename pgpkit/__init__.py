"""Encoding and decoding of OpenPGP packets, keys, signatures and subpackets."""

__version__ = "0.1.0"