from __future__ import annotations


class FacetchefError(Exception):
    pass


class ConfigError(FacetchefError):
    pass


class MissingFileError(FacetchefError):
    pass


class CatalogError(FacetchefError):
    pass


class MalformedRecipeError(CatalogError):
    def __init__(self, record_index: int, field: str, record_id: object = None, reason: str = "missing") -> None:
        self.record_index = record_index
        self.record_id = record_id
        self.field = field
        self.reason = reason
        where = f"recipe #{record_index}"
        if record_id is not None:
            where += f" (id={record_id!r})"
        super().__init__(f"{where}: {reason} field {field!r}")
