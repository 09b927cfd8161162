# binvis/errors.py

class BinVisError(Exception):
    pass

class EmptyInputError(BinVisError):
    def __init__(self, msg: str = "Empty file"):
        super().__init__(msg)

class EncodingError(BinVisError):
    """PNG serialization failed."""
    pass

class ConfigError(BinVisError):
    pass
