from .outcome import ErrorKind, Failure, Headers, Outcome, Success
from .users import USER_DOC_PREFIX, UserCreate, UserRecord

__all__ = [
    "ErrorKind",
    "Failure",
    "Headers",
    "Outcome",
    "Success",
    "USER_DOC_PREFIX",
    "UserCreate",
    "UserRecord",
]
