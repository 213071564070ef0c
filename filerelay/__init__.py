"""HTTP service for uploading, serving once and converting audio files."""

__version__ = "1.0.0"