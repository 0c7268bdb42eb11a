from .result import Outcome, Ok, Failure, of_value, of_error
from .invoke import invoke, outcome_of, Operation
from .errors import OutcomeError, MissingArgumentError, ConflictingArgumentsError
from .version import __version__

__all__ = [
    "Outcome", "Ok", "Failure", "of_value", "of_error",
    "invoke", "outcome_of", "Operation",
    "OutcomeError", "MissingArgumentError", "ConflictingArgumentsError",
    "__version__",
]
