class ParseError(ValueError):
    """Text could not be interpreted as a MAC address."""

    MESSAGE = "Could not parse mac address."

    def __init__(self, *_args: object) -> None:
        # pickle and copy rebuild exceptions as cls(*args)
        super().__init__(self.MESSAGE)
