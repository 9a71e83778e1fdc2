"""Protocol definitions for the parser package.

Contains structural typing protocols that define interfaces for
parser collaborators, so the pipeline does not depend on a concrete
terminal UI.
"""

from typing import Protocol


class ProgressReporter(Protocol):
    """Protocol defining the interface for pipeline progress reporting.

    Implementations show one active stage at a time:
    - ``spinner`` starts a stage
    - ``set_message`` updates the active stage
    - ``finish`` ends it with a message, ``finish_and_clear`` ends it silently
    - ``complete`` reports that the whole run succeeded
    """

    def spinner(self, message: str) -> None:
        """Start a new stage with a message."""
        ...

    def set_message(self, message: str) -> None:
        """Update the message of the active stage."""
        ...

    def finish(self, message: str) -> None:
        """End the active stage and leave a message behind."""
        ...

    def finish_and_clear(self) -> None:
        """End the active stage without leaving a message."""
        ...

    def complete(self, message: str) -> None:
        """Report successful completion."""
        ...
