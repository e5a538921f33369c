"""Wheel fitment adapter: vehicle in, OEM and upgrade fitment out."""

__version__ = "1.0.0"
