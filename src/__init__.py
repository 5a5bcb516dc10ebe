"""Blog API package."""
