"""Infrastructure layer: engine access, lookup clients, config and logging."""
