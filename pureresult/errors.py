from dataclasses import dataclass


class OutcomeError(Exception):
    def __str__(self):
        return "Unknown outcome error."


@dataclass
class MissingArgumentError(OutcomeError, TypeError):
    method: str
    argument: str

    def __str__(self):
        return f"`{self.method}` requires `{self.argument}`, got None."


@dataclass
class ConflictingArgumentsError(OutcomeError, TypeError):
    msg: str

    def __str__(self):
        return self.msg


def require(method: str, **arguments):
    """Raise `MissingArgumentError` for the first argument that is None."""
    for name, value in arguments.items():
        if value is None:
            raise MissingArgumentError(method, name)
