import logging
import typer
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.markup import escape

from vidshrink.config.loader import load_config
from vidshrink.config.models import AppConfig
from vidshrink.infrastructure.logging import setup_logging
from vidshrink.infrastructure.event_bus import EventBus
from vidshrink.infrastructure.file_scanner import FileScanner
from vidshrink.infrastructure.ffmpeg import FFmpegAdapter
from vidshrink.pipeline.orchestrator import EncodeOrchestrator
from vidshrink.domain.errors import ConfigError, MissingDependency, NoInputFiles, VidShrinkError
from vidshrink.domain.models import CompressionResult, EncodeRequest, VideoFile
from vidshrink.ui.manager import UIManager
from vidshrink.ui.prompts import ask_suffix, ask_video_file, resolve_choice
from vidshrink.ui.spinner import ProgressSpinner
from vidshrink.ui.splash import print_splash

app = typer.Typer(help="VidShrink - compress a video from the current directory with FFmpeg")

def format_result(result: CompressionResult) -> str:
    return (
        "Video compressed successfully!\n"
        f"  Input file: {result.input_path.name} [{result.input_size_mb:.2f}MB]\n"
        f"  Output file: {result.output_path.name} [{result.output_size_mb:.2f}MB]\n"
        f"  Reduction percentage: {result.reduction_percent:.2f}%"
    )

def run(
    config: AppConfig,
    directory: Path,
    console: Console,
    file_name: Optional[str] = None,
    suffix: Optional[str] = None,
) -> CompressionResult:
    """Whole interactive flow; every failure surfaces as a VidShrinkError."""
    logger = logging.getLogger(__name__)
    general = config.general

    ffmpeg = FFmpegAdapter(general)
    if not ffmpeg.is_available():
        raise MissingDependency(f"{general.ffmpeg_binary} is not installed. Please install it before running VidShrink")

    print_splash(console)

    scanner = FileScanner(extensions=general.extensions)
    try:
        files = scanner.list_video_files(directory)
    except OSError as e:
        raise NoInputFiles(f"Cannot read directory {directory}: {e}") from e
    if not files:
        raise NoInputFiles(
            "No video files found in the current directory, with the following extensions: "
            + ", ".join(general.extensions)
        )
    logger.info(f"Found {len(files)} video file(s) in {directory}")

    if file_name is not None:
        selected = resolve_choice(file_name, files)
        if selected is None:
            raise NoInputFiles(f"{file_name} is not one of the video files in {directory}")
    else:
        selected = ask_video_file(console, files)
    if suffix is None:
        suffix = ask_suffix(console, general.default_suffix)

    video = VideoFile(path=directory / selected)
    request = EncodeRequest(input_path=video.path, output_suffix=suffix)

    bus = EventBus()
    spinner = ProgressSpinner(console)
    UIManager(bus, spinner)
    orchestrator = EncodeOrchestrator(config=config, event_bus=bus, ffmpeg_adapter=ffmpeg)
    with spinner:
        return orchestrator.encode(request)

@app.command()
def compress(
    directory: Path = typer.Argument(Path("."), help="Directory to pick the video from"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to YAML config"),
    file_name: Optional[str] = typer.Option(None, "--file", "-f", help="Video to compress (skips the selection prompt)"),
    suffix: Optional[str] = typer.Option(None, "--suffix", "-s", help="Suffix for the compressed file (skips the prompt)"),
    debug: bool = typer.Option(False, "--debug/--no-debug", help="Enable verbose debug logging")
):
    """Compress one video and report the size reduction."""
    console = Console()

    try:
        if config_path is not None and not config_path.exists():
            raise ConfigError(f"Config file {config_path} does not exist.")
        config = load_config(config_path)
        if debug:
            config.general.debug = True

        logger = setup_logging(config.general.log_file, debug=config.general.debug)
        logger.info(f"VidShrink started: directory={directory}")

        result = run(config, directory, console, file_name=file_name, suffix=suffix)
        console.print(f"[bold green]{escape(format_result(result))}[/bold green]", highlight=False)

    except VidShrinkError as e:
        logging.getLogger(__name__).info(f"Aborted: {e}")
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=e.exit_code)

    except KeyboardInterrupt:
        typer.echo("\nInterrupted by user")
        raise typer.Exit(code=130)

if __name__ == "__main__":
    app()
