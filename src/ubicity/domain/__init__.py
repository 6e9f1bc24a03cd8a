"""Domain layer — experience models, validation rules, and analytics.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
