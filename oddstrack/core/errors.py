"""Domain errors raised by the ingestion, statistics and prediction layers.

Every error carries a short machine-readable ``code`` so the API can report
it without knowing the concrete class. Storage failures are not wrapped here;
they propagate as whatever the database driver raises.
"""


class OddsTrackError(Exception):
    code = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NormalizationError(OddsTrackError):
    code = "normalization_error"

    def __init__(self, token: str):
        super().__init__(f'invalid value "{token}": use "n.nn" or "n.nnx"')
        self.token = token


class InvalidFormat(OddsTrackError):
    code = "invalid_format"

    def __init__(self, token: str):
        super().__init__(f'invalid format in "{token}": use "n.nn" or "n.nnx"')
        self.token = token


class NoValuesFound(OddsTrackError):
    code = "no_values_found"

    def __init__(self, message: str = "no multipliers found in the source"):
        super().__init__(message)


class InsufficientData(OddsTrackError):
    code = "insufficient_data"


class UnreadableImage(OddsTrackError):
    code = "unreadable_image"

    def __init__(self, message: str = "could not decode the uploaded image"):
        super().__init__(message)
