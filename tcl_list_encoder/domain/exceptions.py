"""Domain exception hierarchy."""


class EncoderException(Exception):
    pass


class UnsupportedValueException(EncoderException):
    pass


class NestingTooDeepException(EncoderException):
    def __init__(self, max_depth: int) -> None:
        super().__init__(f"List nesting exceeds the maximum depth of {max_depth}")
        self.max_depth = max_depth
