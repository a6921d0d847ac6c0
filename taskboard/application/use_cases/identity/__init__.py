"""Identity use cases."""

from taskboard.application.use_cases.identity.identity_operations import IdentityService

__all__ = ["IdentityService"]
