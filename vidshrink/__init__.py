"""VidShrink - compress a single video with ffmpeg."""

__version__ = "1.0.0"
__author__ = "VidShrink contributors"
