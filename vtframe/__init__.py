"""Terminal screen model: cells, draw state, framebuffer, function dispatch and frame rendering."""

__version__ = "0.1.0"

__all__ = [
    "actions",
    "cells",
    "controls",
    "csi_control",
    "dispatcher",
    "display",
    "drawstate",
    "framebuffer",
    "framestate",
    "userinput",
]