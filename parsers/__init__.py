"""Input parsers for vehicle details."""
