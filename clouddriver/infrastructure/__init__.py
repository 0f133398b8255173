"""Infrastructure layer: SQL persistence for the catalog."""
