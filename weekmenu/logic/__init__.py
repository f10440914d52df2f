"""Core business logic layer.

Subpackages:
- rules: menu validation (completeness, vegetarian compatibility, recipe resolution)
- reporting: nutrition rollup
- shopping: headcount-scaled shopping lists
- auth: the authorization gate
- services: recipe and menu use cases
"""
__all__ = ["rules", "reporting", "shopping", "auth", "services"]
