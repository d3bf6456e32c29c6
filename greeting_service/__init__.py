"""Configuration-driven greeting microservice."""
