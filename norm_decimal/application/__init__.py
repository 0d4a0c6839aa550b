"""Application layer: ports consumed by infrastructure adapters."""
