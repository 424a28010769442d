from typing import Optional
from rich.console import Console
from rich.markup import escape
from rich.status import Status

class ProgressSpinner:
    """Single-line spinner that ends with a success or failure mark."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self._status: Optional[Status] = None
        self.text = ""

    @property
    def running(self) -> bool:
        return self._status is not None

    def start(self, text: str):
        self.text = text
        if self._status is None:
            self._status = self.console.status(text, spinner="dots")
            self._status.start()
        else:
            self._status.update(text)

    def update(self, text: str):
        self.start(text)

    def stop(self):
        if self._status is not None:
            self._status.stop()
            self._status = None

    def succeed(self, text: str):
        self.stop()
        self.text = text
        self.console.print(f"[bold green]✔[/bold green] {escape(text)}")

    def fail(self, text: str):
        self.stop()
        self.text = text
        self.console.print(f"[bold red]✖[/bold red] {escape(text)}", highlight=False)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
