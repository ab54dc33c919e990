"""filescout - find the largest file and walk directory trees with cancellable callbacks."""

__version__ = "0.1.0"
