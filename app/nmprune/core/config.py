"""Scan and cleanup settings.

Settings are built from command-line options for a single run and are
never read from or written to disk.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TARGET_NAME = "node_modules"
DEFAULT_MAX_DEPTH = 10
MAX_DEPTH_LIMIT = 64


class SizeMode(str, Enum):
    """How freed space is accounted for during deletion.

    Attributes:
        METADATA: Size reported by stat() on the matched directory itself.
            This is a lower bound, not the size of the subtree.
        RECURSIVE: Sum of regular file sizes below the matched directory.
    """

    METADATA = "metadata"
    RECURSIVE = "recursive"


class ScanConfig(BaseModel):
    """Configuration for a scan and the deletion pass that follows it.

    Attributes:
        target_name: Exact directory name to match.
        max_depth: Traversal ceiling; directories deeper than this are
            not listed. Guards against cyclic or pathological trees.
        extra_skip_names: Directory names to skip in addition to the
            built-in protected names.
        follow_symlinks: Descend into symlinked directories.
        size_mode: How freed space is accounted for.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target_name: Annotated[
        str,
        Field(min_length=1, description="Directory name to match"),
    ] = DEFAULT_TARGET_NAME
    max_depth: Annotated[
        int,
        Field(ge=0, le=MAX_DEPTH_LIMIT, description=f"Traversal ceiling (0-{MAX_DEPTH_LIMIT})"),
    ] = DEFAULT_MAX_DEPTH
    extra_skip_names: Annotated[
        frozenset[str],
        Field(description="Additional directory names to skip"),
    ] = frozenset()
    follow_symlinks: Annotated[
        bool,
        Field(description="Descend into symlinked directories"),
    ] = False
    size_mode: Annotated[
        SizeMode,
        Field(description="Freed-space accounting mode"),
    ] = SizeMode.METADATA

    @field_validator("target_name")
    @classmethod
    def validate_target_name(cls, v: str) -> str:
        """Reject names that could never appear in a single directory listing."""
        if "/" in v or v in (".", ".."):
            msg = f"target_name must be a plain directory name, got {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("extra_skip_names", mode="before")
    @classmethod
    def normalize_skip_names(cls, v: object) -> object:
        """Strip whitespace and drop empty names from user-supplied lists."""
        if isinstance(v, (list, tuple, set, frozenset)):
            return frozenset(str(name).strip() for name in v if str(name).strip())
        return v
