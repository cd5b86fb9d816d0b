"""Exceptions raised by the N-body simulator."""


class ConfigurationError(ValueError):
    """Invalid simulation setup (mass, time step, softening, names, shapes).

    Raised before any integration step runs; a run with an invalid
    configuration cannot meaningfully proceed.
    """
