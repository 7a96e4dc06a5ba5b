"""Application layer: orchestrators, commands and queries over the domains."""
