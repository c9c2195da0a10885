"""Output layer: turns ServiceResult into stdout/stderr text."""
