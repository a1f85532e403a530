"""Domain-level exceptions.

Every failure the core can report is a subclass of DomainException so the
CLI layer can catch them uniformly and map each family to an outcome:

- ValidationError      malformed caller input, never touches storage
- EntityNotFoundError  the referenced aggregate does not exist
- ConflictError        the write was already done (expected under races)
- StorageError         infrastructure failure, not retried
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


# --- Validation ---------------------------------------------------------------


class ValidationError(DomainException):
    """Caller input could not be turned into a domain value."""


class BlankNameError(ValidationError):

    def __init__(self) -> None:
        super().__init__("Product name cannot be blank")


class NameTooLongError(ValidationError):

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(
            f"Product name too long: {length} characters, maximum {limit} allowed"
        )
        self.length = length


class InvalidAmountError(ValidationError):

    def __init__(self, value: object) -> None:
        super().__init__(f"Amount must be a positive price within range: {value}")
        self.value = value


class InvalidPercentError(ValidationError):

    def __init__(self, value: object) -> None:
        super().__init__(f"Percent must be between 0 and 100: {value}")
        self.value = value


class InvalidCountryError(ValidationError):

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid country: {value}")
        self.value = value


class BlankIdentifierError(ValidationError):

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} cannot be blank")
        self.field = field


# --- Lookup -------------------------------------------------------------------


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


# --- Conflicts ----------------------------------------------------------------


class ConflictError(DomainException):
    """The requested write has already been performed."""


class DiscountAlreadyAppliedError(ConflictError):

    def __init__(self, product_id: str, discount_id: str) -> None:
        super().__init__(
            f"Discount {discount_id} already applied to product {product_id}"
        )
        self.product_id = product_id
        self.discount_id = discount_id


class ProductAlreadyExistsError(ConflictError):

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} already exists")
        self.product_id = product_id


# --- Infrastructure -----------------------------------------------------------


class StorageError(DomainException):
    """The backing store failed.

    The operation may have partially reached the store before failing, so
    callers must not retry blindly.  ``cause`` is also chained as
    ``__cause__`` by the raising code.
    """

    def __init__(self, context: str, cause: BaseException | None = None) -> None:
        message = context if cause is None else f"{context}: {cause}"
        super().__init__(message)
        self.context = context
        self.cause = cause
