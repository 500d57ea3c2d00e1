class RideError(Exception):
    exit_code = 1


class MissingInput(RideError):
    exit_code = 1


class MalformedInput(RideError):
    exit_code = 3


class StorageError(RideError):
    exit_code = 4


class DuplicateRide(StorageError):
    pass


class PostError(RideError):
    def __init__(self, message: str, exit_code: int = 127):
        super().__init__(message)
        self.exit_code = exit_code
