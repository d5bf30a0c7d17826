from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "VALIDATION"
    INTERNAL = "INTERNAL"


class VideoCallError(Exception):
    """Failure raised while issuing or describing a video call room"""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.INTERNAL):
        super().__init__(message)
        self.message = message
        self.kind = kind
