"""
Image Generation
================

Minimal solid-colour PNG output.
"""

from binkit.image.png import PNG_SIGNATURE, rgba, rgba_base64

__all__ = [
    "PNG_SIGNATURE",
    "rgba",
    "rgba_base64",
]
