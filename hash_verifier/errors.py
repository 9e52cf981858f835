"""Error taxonomy for comparisons and report export.

All exceptions keep their constructor arguments in ``args`` so they survive
pickling across the process boundary of a hash task.
"""

from typing import Optional


class HashVerifierError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(HashVerifierError):
    """A required input is missing; the user has to correct the request."""


class MissingSourceFile(ValidationError):
    def __init__(self, message: str = "Please select a source file."):
        super().__init__(message)


class MissingComparisonFile(ValidationError):
    def __init__(self, message: str = "Please select a comparison file."):
        super().__init__(message)


class MissingExpectedHash(ValidationError):
    def __init__(self, message: str = "Please enter the expected hash value."):
        super().__init__(message)


class InvalidTimestamp(ValidationError):
    def __init__(self, value):
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"Invalid last-modified timestamp: {self.value}"


class UnsupportedAlgorithm(HashVerifierError):
    def __init__(self, algorithm: str):
        super().__init__(algorithm)
        self.algorithm = algorithm

    def __str__(self) -> str:
        return f"Unsupported hash algorithm: {self.algorithm}"


class DigestComputationError(HashVerifierError):
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __reduce__(self):
        return (type(self), (self.args[0], self.cause))


class MetadataExtractionError(HashVerifierError):
    """Raised by metadata extractors; never aborts a comparison."""


class SerializationError(HashVerifierError):
    def __init__(self, format: str, message: str):
        super().__init__(format, message)
        self.format = format
        self.message = message

    def __str__(self) -> str:
        return f"{self.format}: {self.message}"


class ComparisonInProgress(HashVerifierError):
    def __init__(self, message: str = "A comparison is already running."):
        super().__init__(message)


class StaleComparison(HashVerifierError):
    def __init__(self, message: str = "The comparison was reset before it finished."):
        super().__init__(message)


class NoReportAvailable(HashVerifierError):
    def __init__(self, message: str = "No report available. Run a comparison first."):
        super().__init__(message)
