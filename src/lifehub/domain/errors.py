"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Mandatory input missing or out of range. The store is left unchanged."""


class MalformedSnapshotError(DomainError):
    """A snapshot document could not be parsed or has the wrong shape."""


class PersistenceError(DomainError):
    """The snapshot could not be written to durable storage."""


def missing_fields(entity: str, fields: list[str]) -> str:
    """Return message for an add-operation missing mandatory fields."""
    return f"Cannot add {entity}: please fill {', '.join(fields)}"


def day_index_out_of_range(day_index: int) -> str:
    """Return message for a weekday index outside Monday..Sunday."""
    return f"Day index {day_index} is out of range (expected 0-6, Monday=0)"


def invalid_choice(field: str, value: object, choices: list[str]) -> str:
    """Return message for a value outside an enumerated set."""
    return f"Invalid {field} '{value}'. Expected one of: {', '.join(choices)}"


def malformed_field(field: str, reason: str) -> str:
    """Return message for a snapshot field with the wrong shape."""
    return f"Snapshot field '{field}' is malformed: {reason}"


def snapshot_write_failed(reason: str) -> str:
    """Return message when the snapshot could not be saved."""
    return f"Changes are kept for this session but could not be saved: {reason}"
