"""Decode raw RGB and YUV frame dumps into RGB pixels and 24-bit BMP files."""

__version__ = "0.1.0"
__all__ = ["__version__"]