"""Errors raised while computing EdgeLB pool specifications."""


class PoolSpecError(Exception):
    """Base class for errors pertaining to a single resource's pool configuration."""


class DecodeError(PoolSpecError):
    """The configuration annotation could not be decoded."""

    def __init__(self, key, message):
        self.key = key
        super().__init__(
            f'failed to parse the value of "{key}" as a configuration object: {message}'
        )


class ValidationError(PoolSpecError):
    """A field of the pool specification holds an invalid value."""

    def __init__(self, field, value, message):
        self.field = field
        self.value = value
        super().__init__(message)


class TransitionError(PoolSpecError):
    """An update attempted to change an immutable field."""

    def __init__(self, field, message):
        self.field = field
        super().__init__(message)


class NameGenerationError(PoolSpecError):
    """A unique EdgeLB pool name could not be generated."""


class RegistryError(Exception):
    """The EdgeLB pool registry could not answer a request.

    ``transient`` tells whether the same request may succeed if retried.
    """

    def __init__(self, message, transient=False):
        self.transient = transient
        super().__init__(message)


class PoolNotFoundError(RegistryError):
    """The requested EdgeLB pool does not exist."""

    def __init__(self, name):
        self.name = name
        super().__init__(f'edgelb pool "{name}" not found', transient=False)
