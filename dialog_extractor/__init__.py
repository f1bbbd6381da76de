"""Dialog extractor: find the dialog in a video from its subtitle timings."""

__version__ = "0.1.0"
