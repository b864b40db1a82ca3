"""Domain layer: health states, filters and response value objects."""
