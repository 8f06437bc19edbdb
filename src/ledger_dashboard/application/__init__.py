"""Application layer: ports and report use cases."""
