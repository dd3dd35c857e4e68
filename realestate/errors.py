"""
Exceptions raised by the valuation model.
"""


class InvalidInputError(ValueError):
    """
    A property was constructed (or left) in a state the valuation formulas
    cannot work with.

    Raised synchronously by the constructing call, never deferred to the
    first valuation.
    """

    def __init__(self, field_name: str, value, reason: str):
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field_name}={value!r}: {reason}")
