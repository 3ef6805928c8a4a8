"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class InvalidReferenceError(Exception):
    """Raised when a foreign key does not resolve to an existing entity."""

    def __init__(self, field: str, entity_type: str, entity_id: int):
        self.field = field
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{field} refers to unknown {entity_type} '{entity_id}'")


class AuthenticationError(Exception):
    """Raised when credentials or a session cannot be verified."""

    def __init__(self, message: str = "Invalid credentials"):
        self.message = message
        super().__init__(message)


class UnsupportedImportFileError(Exception):
    """Raised when an uploaded import file is not CSV or XLSX."""

    def __init__(self, filename: str, reason: str | None = None):
        self.filename = filename
        self.reason = reason
        super().__init__(reason or f"Unsupported import file '{filename}'; expected .csv or .xlsx")
