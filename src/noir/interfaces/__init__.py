"""User-facing interfaces for Noir."""
