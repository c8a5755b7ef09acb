"""Domain layer: entities, exceptions and client ports."""
