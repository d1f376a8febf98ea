"""
Seed data for the entity store.
"""
from app.db.seed_data import seed_resources, SAMPLE_RESOURCES

__all__ = ["seed_resources", "SAMPLE_RESOURCES"]
