"""Exception hierarchy for version checking and tree pruning."""


class VersionCheckError(Exception):
    """Base exception for all kspver failures."""


class MalformedExpressionError(VersionCheckError, ValueError):
    """Raised when a version term or expression does not match the grammar."""


class MalformedAnnotationError(MalformedExpressionError):
    """Raised when a `:KSP_VERSION[...]` marker in a name cannot be used."""


class InvalidArgumentError(VersionCheckError, ValueError):
    """Raised when a required argument is missing or not usable."""


class MalformedTreeError(VersionCheckError, ValueError):
    """Raised when serialized data does not describe a configuration tree."""
