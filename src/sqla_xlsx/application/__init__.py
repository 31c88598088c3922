"""Application layer – export use cases independent of the ORM."""
