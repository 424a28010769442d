DEFAULT_OUTPUT_EXTENSION = "mp4"

def build_output_name(input_name: str, suffix: str, extension: str = DEFAULT_OUTPUT_EXTENSION) -> str:
    """Drops the last dot-delimited segment of input_name and appends suffix + extension.

    The last segment is removed even when it is not an extension, so
    "movie" with "_x" gives "_x.mp4".
    """
    stem = ".".join(input_name.split(".")[:-1])
    return f"{stem}{suffix}.{extension}"
