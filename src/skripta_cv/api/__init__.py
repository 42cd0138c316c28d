"""HTTP adapter around the CV generation service."""
