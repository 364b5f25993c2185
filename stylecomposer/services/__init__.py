"""Theme definition, resolution and query services."""
