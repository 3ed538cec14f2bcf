"""Infrastructure layer: rule list sources and the process-wide default list."""
