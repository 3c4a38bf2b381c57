"""
Routes Package

Blueprints for the public browsing API and the admin API.
"""

from .public import public_bp
from .admin import admin_bp

__all__ = ['public_bp', 'admin_bp']
