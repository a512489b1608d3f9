"""SQLAlchemy persistence for projects, tasks and messages."""
