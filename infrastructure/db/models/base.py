"""
Declarative base shared by the store models.
"""
from sqlalchemy.orm import registry

mapper_registry = registry()
Base = mapper_registry.generate_base()
