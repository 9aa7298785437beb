"""Text editor building blocks: buffers, selections, views, highlighting and layout."""

__version__ = "0.1.0"