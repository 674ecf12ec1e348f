"""Internal implementation package; import public names from ``planekit``."""
