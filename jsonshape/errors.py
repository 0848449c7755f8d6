ERROR_MSG_FOR_INCORRECT_SCHEMA = (
    "The object you were passing is not a valid JSON schema. Are you sure you "
    "constructed it correctly? From experience, users can sometimes forget to "
    "also wrap the main parent object into a \"strict_object()\" function as well."
)


class SchemaMismatch(AssertionError):
    """A value did not match its schema. `errors` holds the jsonschema errors, if any."""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.message = message
        self.errors = list(errors or [])

    def __str__(self):
        return self.message


class NotASchemaError(AssertionError):
    """The object passed as a schema is not recognisable as one."""

    def __init__(self, message: str = ERROR_MSG_FOR_INCORRECT_SCHEMA):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message
