"""Core GELF conversion: models, ports and the conversion routine."""
