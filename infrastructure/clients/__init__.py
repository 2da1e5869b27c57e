from .seed_client import SeedClient

__all__ = ["SeedClient"]
