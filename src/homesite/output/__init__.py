"""Output layer: turn ServiceResult into CLI text."""
