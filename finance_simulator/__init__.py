"""Financial simulators: loans, fixed income, emergency fund, portfolio and retirement."""

__version__ = "0.1.0"
