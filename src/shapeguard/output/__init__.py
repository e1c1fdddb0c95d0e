"""Output layer: renders ServiceResult as Rich text or JSON."""
