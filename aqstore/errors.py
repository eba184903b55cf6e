#file: aqstore/errors.py


class StoreError(Exception):
    """Base class for errors raised by the air quality store."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RecordNotFoundError(StoreError):
    """Raised when an operation targets an id that is not in the store."""

    def __init__(self, record_id: int):
        super().__init__(f"air quality data with id={record_id} not found")
        self.record_id = record_id
