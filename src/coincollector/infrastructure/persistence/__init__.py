"""SQLAlchemy persistence: engine management, models and repositories."""
