"""Configuration, logging, database setup and error types."""
