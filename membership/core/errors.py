# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Domain errors raised by the service layer."""


class MembershipError(Exception):
    """Base class for membership business-rule violations."""


class DuplicateNameError(MembershipError):
    """A member with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Member '{name}' already exists")
        self.name = name
