"""Name rules deciding which temp entries are disposable.

The defaults cover residue left behind by Go toolchain builds, gopls
profiling dumps, and Consul test agents. A ``MatchRules`` value is
immutable; alternate rule sets are built with ``model_copy(update=...)``
or loaded from the config file.
"""

import re
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Directory name prefixes. Overlaps (e.g. "consul" and "dc1-consul") are harmless.
DEFAULT_DIR_PREFIXES: tuple[str, ...] = (
    "007-agent",
    "agent_smith",
    "go-build",
    "jones-agent",
    "Test",
    "test-agent",
    "test-consul-agent",
    "consul",
    "Agent1-agent",
    "Agent2-agent",
    "betty-agent",
    "bob-agent",
    "bonnie-agent",
    "dc1-agent",
    "dc2-agent",
    "gopls-",
    "dc1-consul",
    "dc2-consul",
    "test-container",
)

# Leftover toplevel from consul test runs
DEFAULT_DIR_EXACT_NAME = "consul-test"

DEFAULT_FILE_PREFIXES: tuple[str, ...] = (
    "snapshot",
    "config-err-",
)

# Whole-name regexes for files.
DEFAULT_FILE_PATTERNS: tuple[str, ...] = (
    r"go\..*\.(sum|mod)",
    r"gopls\..*-heap.pb.gz",
    r"gopls\..*-goroutines.txt",
    r"gopls-.*.log",
    r"gopls\..*\.zip",
)


class MatchRules(BaseModel):
    """Immutable set of name rules for top-level temp entries.

    Attributes:
        dir_prefixes: A directory matches if its name starts with any of these.
        dir_exact_name: A directory with exactly this name always matches.
        file_prefixes: A file matches if its name starts with any of these.
        file_patterns: A file matches if its whole name matches any of these regexes.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    dir_prefixes: Annotated[
        tuple[str, ...],
        Field(description="Directory name prefixes"),
    ] = DEFAULT_DIR_PREFIXES
    dir_exact_name: Annotated[
        str,
        Field(min_length=1, description="Directory name matched literally"),
    ] = DEFAULT_DIR_EXACT_NAME
    file_prefixes: Annotated[
        tuple[str, ...],
        Field(description="File name prefixes"),
    ] = DEFAULT_FILE_PREFIXES
    file_patterns: Annotated[
        tuple[str, ...],
        Field(description="Whole-name regexes for files"),
    ] = DEFAULT_FILE_PATTERNS

    @field_validator("dir_prefixes", "file_prefixes")
    @classmethod
    def validate_prefixes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject empty prefixes, which would match every entry."""
        if any(not prefix for prefix in v):
            msg = "prefixes cannot be empty strings"
            raise ValueError(msg)
        return v

    @field_validator("file_patterns")
    @classmethod
    def validate_patterns(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Ensure every pattern is a valid regular expression."""
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as e:
                msg = f"invalid file pattern {pattern!r}: {e}"
                raise ValueError(msg) from None
        return v


DEFAULT_RULES = MatchRules()
