"""Application layer: ports and use cases orchestrating the media fan-out."""
