"""Application layer: wire DTOs and serialization."""
