"""Terminal progress display for the fetch-and-convert workflow."""

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TaskID, TextColumn


class ProgressDisplay:
    """Spinner-based progress reporter writing to stderr.

    Only one stage is shown at a time. When disabled, every method is a no-op.
    """

    def __init__(self, enabled: bool, console: Console | None = None) -> None:
        self._enabled = enabled
        self._console = console or Console(stderr=True)
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    @property
    def active(self) -> bool:
        return self._progress is not None

    def spinner(self, message: str) -> None:
        """Show a spinner with a message, replacing any active one."""
        if not self._enabled:
            return

        self._stop()
        progress = Progress(
            SpinnerColumn(spinner_name="dots", style="cyan"),
            TextColumn("{task.description}"),
            console=self._console,
            transient=True,
        )
        self._task_id = progress.add_task(escape(message), total=None)
        progress.start()
        self._progress = progress

    def set_message(self, message: str) -> None:
        """Update the message on the current spinner."""
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, description=escape(message))

    def finish(self, message: str) -> None:
        """Stop the current spinner and leave a message in its place."""
        if self._progress is None:
            return
        self._stop()
        self._console.print(f"[cyan]✔[/cyan] {escape(message)}")

    def finish_and_clear(self) -> None:
        """Stop the current spinner without leaving anything behind."""
        self._stop()

    def complete(self, message: str) -> None:
        """Show a completion message with a green checkmark."""
        if not self._enabled:
            return
        self._console.print(f"[bold green]✔[/bold green] {escape(message)}")

    def _stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None
