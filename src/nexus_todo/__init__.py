"""nexus-todo: a single-user task list persisted in a local key-value store."""

__version__ = "0.1.0"
