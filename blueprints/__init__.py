"""
Blueprints Package - Modular application structure
Each blueprint handles a specific surface of the site
"""

__all__ = ['portfolio', 'dashboard']
