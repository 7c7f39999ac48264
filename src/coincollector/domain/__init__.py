"""Domain layer: entities, error taxonomy and storage services."""
