from typing import List, Optional
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

def resolve_choice(answer: str, files: List[str]) -> Optional[str]:
    """Maps a 1-based index or an exact file name to a file name."""
    answer = answer.strip()
    if answer in files:
        return answer
    if answer.isdigit():
        index = int(answer)
        if 1 <= index <= len(files):
            return files[index - 1]
    return None

def ask_video_file(console: Console, files: List[str]) -> str:
    """Select the video file you want to compress."""
    table = Table(show_header=False, box=None)
    table.add_column(style="cyan", justify="right")
    table.add_column()
    for index, name in enumerate(files, start=1):
        table.add_row(str(index), name)
    console.print(table)

    while True:
        answer = Prompt.ask("Select the video file you want to compress", console=console, default="1")
        selected = resolve_choice(answer, files)
        if selected is not None:
            return selected
        console.print(f"[red]Invalid selection {escape(repr(answer))}; enter a number or a file name.[/red]")

def ask_suffix(console: Console, default: str) -> str:
    return Prompt.ask("Enter a suffix for compressed file", console=console, default=default)
