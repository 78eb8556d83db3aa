"""Domain layer: entities, errors, repository abstractions and services."""
