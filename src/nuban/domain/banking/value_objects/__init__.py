"""Value objects for banking domain."""

from nuban.domain.banking.value_objects.nuban_account import NubanAccount

__all__ = ["NubanAccount"]
