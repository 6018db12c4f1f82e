"""POSLink demo - configure a terminal transport and send it Init."""

__version__ = "0.1.0"
