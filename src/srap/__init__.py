"""srap - the Shell Rc APpender."""

__version__ = "0.1.0"
