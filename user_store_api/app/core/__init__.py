"""Core building blocks: configuration, logging, errors and the record store."""
