"""Domain layer: engine-independent entities and pure DDL generation."""
