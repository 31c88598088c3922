"""Adapters – ORM integrations."""
