"""Application layer: the status pipeline and its helpers."""
