class ObserverError(Exception):
    """Base class for failures that end in the error view."""


class TemplateNotFoundError(ObserverError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Template not loaded: {name}")
        self.name = name


class AccountsFetchError(ObserverError):
    """The accounts listing could not be fetched or did not parse."""
