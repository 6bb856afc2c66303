"""Base class for context managers."""


class ContextManager:
    """Base class for context managers with close() method."""

    def close(self) -> None:
        """Close resources. Override in subclass."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
