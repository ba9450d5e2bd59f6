"""Schema model, type registry and SQL helpers used by the generators."""
