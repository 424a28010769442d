class VidShrinkError(Exception):
    """Base error; exit_code is the process status the CLI exits with."""
    exit_code = 1

class MissingDependency(VidShrinkError):
    exit_code = 2

class NoInputFiles(VidShrinkError):
    exit_code = 3

class EncodeFailure(VidShrinkError):
    exit_code = 4

class StatsIOFailure(VidShrinkError):
    exit_code = 5

class ConfigError(VidShrinkError):
    exit_code = 6
