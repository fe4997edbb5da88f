"""Module de validation."""

from netrc_utils.validation.base import Validator
from netrc_utils.validation.permissions import NetrcPermissionChecker

__all__ = [
    "Validator",
    "NetrcPermissionChecker",
]
