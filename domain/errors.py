class PastLifeError(Exception):
    pass


class ValidationError(PastLifeError):
    """A required field is missing. The user can fix it."""


class GenerationError(PastLifeError):
    """The text-generation service failed or returned nothing usable."""


class ConfigurationError(PastLifeError):
    """Startup configuration is unusable, e.g. an empty title catalog."""
