class MaigachaError(Exception):
    """Base class for every failure a command can end with."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateName(MaigachaError):
    def __init__(self, name: str):
        super().__init__(f'"{name}" is already in the list.')
        self.name = name


class NotFound(MaigachaError):
    def __init__(self, name: str):
        super().__init__(f'"{name}", not in list.')
        self.name = name


class InvalidWeight(MaigachaError):
    def __init__(self, value):
        super().__init__(f"Invalid weight {value!r}: weight must be a positive number.")
        self.value = value


class InvalidCategory(MaigachaError):
    def __init__(self, value):
        super().__init__(f"Invalid category {value!r}: expected common or rare.")
        self.value = value


class InvalidRequest(MaigachaError):
    pass


class EmptyCollection(MaigachaError):
    def __init__(self):
        super().__init__("Nothing to pull.")


class NoSelectableItems(MaigachaError):
    def __init__(self):
        super().__init__("Nothing to pull: every item has a weight of 0.")


class StoreError(MaigachaError):
    def __init__(self, path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class StoreCorrupted(StoreError):
    """The store file exists but cannot be trusted.

    `errors` holds the validator's path/message entries so the caller can
    show exactly which records are broken.
    """

    def __init__(self, path, errors):
        self.errors = list(errors)
        details = "; ".join(f"{e['path']}: {e['message']}" for e in self.errors)
        super().__init__(path, f"store file is corrupted ({details})")
