"""Query resolution: registry, tiered resolver and gateway."""
