"""Note file and heading models."""

from pydantic import BaseModel, Field


class NoteFile(BaseModel):
    """Reference to a note inside the vault.

    The path is vault-relative and always uses forward slashes so that
    folder filters and deep links behave the same on every platform.
    """

    model_config = {"frozen": True}

    path: str
    basename: str
    extension: str

    @classmethod
    def from_path(cls, relative_path: str) -> "NoteFile":
        """Build a reference from a vault-relative POSIX path."""
        name = relative_path.rsplit("/", 1)[-1]
        if "." in name.lstrip("."):
            basename, extension = name.rsplit(".", 1)
        else:
            basename, extension = name, ""
        return cls(path=relative_path, basename=basename, extension=extension)


class Heading(BaseModel):
    """A Markdown heading with its nesting level and 0-based start line."""

    model_config = {"frozen": True}

    text: str
    level: int = Field(ge=1, le=6)
    line: int = Field(ge=0)
