"""Domain layer: models, interfaces and errors."""
