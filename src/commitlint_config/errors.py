class ConfigurationError(ValueError):
    """Raised when a commit lint configuration cannot be loaded or resolved"""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        super().__init__(f"{source}: {message}" if source else message)
