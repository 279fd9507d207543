"""Exceptions raised by the GELF conversion core."""


class GelfError(Exception):
    """Base class for gelfkit errors."""


class HostResolutionError(GelfError):
    """The local host identifier could not be resolved.

    No record can be built without a host, so this aborts the conversion.
    """


class AmbientContextError(GelfError):
    """The ambient context store could not be read.

    Raised by ambient context accessors; the converter treats it as an
    empty context.
    """
