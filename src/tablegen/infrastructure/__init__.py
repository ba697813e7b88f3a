"""Infrastructure layer: database access and statement execution."""
