"""Nexaboard - project management backend.

Layers:
    domain/          # Entities, value objects, repository interfaces
    application/     # Services orchestrating repositories
    infrastructure/  # SQLAlchemy persistence
    presentation/    # FastAPI app and Typer CLI

Identity (users, passwords, tokens, access policies) lives in the separate
nexaboard_identity package; configuration in nexaboard_config.
"""
