"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata knows every table before create_all
"""

from model_api.models.model import ModelRecord  # noqa: F401
