"""Shared utilities: configuration, logging, schemas, errors and the record store."""
