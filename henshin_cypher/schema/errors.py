"""Exceptions raised while loading rule modules."""


class SchemaLoadError(Exception):
    """A rule module file is missing, unreadable or not a YAML mapping."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SchemaValidationError(Exception):
    """A rule module does not fit the rule schema.

    ``errors`` holds one ``{"loc", "msg", "type"}`` dict per invalid field,
    with ``loc`` dotted (``rules.r.lhs.nodes.0.action``).
    """

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)
