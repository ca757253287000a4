"""Helpers for embedded-style work: waveforms, float bit tools, statistics, containers, XML writing and device drivers."""

__version__ = "0.1.0"