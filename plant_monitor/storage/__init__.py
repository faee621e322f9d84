"""Object store collaborators."""

from .s3 import ObjectStore, S3ObjectStore

__all__ = ["ObjectStore", "S3ObjectStore"]
