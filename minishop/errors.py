class CatalogConfigError(RuntimeError):
    """The static catalog tables are inconsistent (e.g. two products share an id)."""


class CartValidationError(ValueError):
    """A checkout request did not carry a usable cart."""
