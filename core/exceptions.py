# core/exceptions.py

class ACSweepError(Exception):
    """Base exception for acsweep errors."""
    pass

class ParameterError(ACSweepError):
    """Raised when parameter resolution or evaluation fails."""
    pass

class ComponentError(ACSweepError):
    """Raised when a component is built with invalid nodes or values."""
    pass

class NetlistError(ACSweepError):
    """Raised when a netlist cannot be read, validated or instantiated."""
    pass

class SweepConfigError(ACSweepError):
    """Raised when an analysis configuration cannot be read or validated."""
    pass

class AnalysisError(ACSweepError):
    """Raised when sweep preconditions (output node, input source, range) are violated."""
    pass
