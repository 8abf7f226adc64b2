"""Infrastructure layer — database engine, schema, and repositories.

This layer depends on stdlib, third-party libs (SQLAlchemy), and the
domain layer's models and errors. It must never import from services,
commands, or config.
"""
