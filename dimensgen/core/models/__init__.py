"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from dimensgen.core.models import Bucket, GeneratedFile
"""

from dimensgen.core.models.bucket import Bucket
from dimensgen.core.models.template import DimensionEntry, GeneratedFile

__all__ = [
    # bucket.py
    "Bucket",
    # template.py
    "DimensionEntry",
    "GeneratedFile",
]
