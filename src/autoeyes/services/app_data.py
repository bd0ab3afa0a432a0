"""Where AutoEyes writes its log file and per-wait debug sessions."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_DIR = Path("autoeyes-data")
DEBUG_SUBDIR = "debug"
LOG_FILE_NAME = "autoeyes.log"


@dataclass(frozen=True)
class AppData:
    """Output locations of one AutoEyes run.

    With debugging enabled, ``data_dir/debug`` holds the log file and one
    DebugFrameLogger session directory per wait.
    """

    data_dir: Path = DEFAULT_DATA_DIR
    debug_enabled: bool = False

    def __post_init__(self):
        # Configuration values may arrive as plain strings
        object.__setattr__(self, "data_dir", Path(self.data_dir))

    @property
    def debug_dir(self) -> Path | None:
        """Parent of the debug session directories, None when not debugging."""
        if not self.debug_enabled:
            return None
        return self.data_dir / DEBUG_SUBDIR

    @property
    def log_file(self) -> Path | None:
        if self.debug_dir is None:
            return None
        return self.debug_dir / LOG_FILE_NAME

    def ensure_directories(self) -> None:
        """Create the data directory, and the debug directory when debugging."""
        for directory in (self.data_dir, self.debug_dir):
            if directory is not None:
                directory.mkdir(parents=True, exist_ok=True)
