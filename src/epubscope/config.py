"""Default settings shared by the library and the CLI."""

from pydantic import BaseModel, Field

CONTAINER_PATH = "META-INF/container.xml"
NO_HEADING = "No heading"
SNIPPET_WINDOW = 100
WINDOW_LENGTH = 30000


class ReaderConfig(BaseModel):
    """Tunable defaults for reading and searching a book."""

    snippet_window: int = Field(default=SNIPPET_WINDOW, ge=0)
    window_length: int = Field(default=WINDOW_LENGTH, ge=1)
    placeholder_title: str = NO_HEADING
    container_path: str = CONTAINER_PATH


DEFAULT_CONFIG = ReaderConfig()
