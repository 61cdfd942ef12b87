"""Domain layer: entities, ports and services of the single-user group backend."""
