"""Exception types raised by the simulation engine."""


class SimulationError(Exception):
    """Base class for all solar_sim errors."""


class InvalidInputError(SimulationError, ValueError):
    """Raised before any step runs when inputs or configuration are malformed.

    Attributes:
        field: Name of the offending input (e.g. ``"masses"``)
        constraint: Short description of the violated constraint
    """

    def __init__(self, field: str, constraint: str):
        self.field = field
        self.constraint = constraint
        super().__init__(f"{field}: {constraint}")


class NumericalInstabilityError(SimulationError, ArithmeticError):
    """Raised at the end of a run whose final state contains non-finite values.

    Only raised when ``SimulationConfig.check_finite`` is enabled. The run has
    already completed; its result is attached as ``result``.
    """

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result
