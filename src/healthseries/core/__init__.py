"""Core domain: models, ports and the series pipeline."""
