"""
Custom exceptions raised by the store and the pet service.
"""

class DocumentStoreError(Exception):
    """Raised when the underlying document store fails to read or write."""
    pass


class PetNotFoundError(LookupError):
    """Raised when no pet matches the requested id."""

    def __init__(self, pet_id: str):
        super().__init__(f"Pet not found: {pet_id}")
        self.pet_id = pet_id
