"""Application layer: DTOs, repository protocols, and the catalog service."""
