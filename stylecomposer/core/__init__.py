"""Core data model of the style composition engine."""
