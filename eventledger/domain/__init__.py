"""Domain layer: value objects, entities and repository contracts."""
