"""
Database Base Module

Holds the shared SQLAlchemy instance. Kept apart from the model modules so
services and the app factory can import it without circular imports.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the app in app.create_app()
db = SQLAlchemy()
