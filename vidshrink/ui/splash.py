from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text
from vidshrink import __author__, __version__

def build_splash() -> Panel:
    body = Group(
        Align.center(Text("VidShrink", style="bold green")),
        Align.center(Text(f"v{__version__}", style="green")),
        Align.center(Text("Video compressor powered by FFmpeg", style="green")),
        Align.center(Text(f"Made by: {__author__}", style="green")),
    )
    return Panel(body, border_style="green", padding=(1, 2))

def print_splash(console: Console):
    console.print(build_splash())
