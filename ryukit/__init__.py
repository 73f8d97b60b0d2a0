"""Buffers, threads, scheduling, JSON options, codecs, image resizing and audio conversion helpers."""

__version__ = "0.1.0"