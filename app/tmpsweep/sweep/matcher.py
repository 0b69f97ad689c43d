"""Eligibility decision for a single directory entry."""

import re

from tmpsweep.sweep.rules import DEFAULT_RULES, MatchRules


class CruftMatcher:
    """Decides whether a top-level temp entry is disposable.

    Directories are checked only against directory rules and files only
    against file rules. Any matching rule makes an entry eligible.

    Example:
        >>> matcher = CruftMatcher()
        >>> matcher.is_eligible(True, "go-build123")
        True
        >>> matcher.is_eligible(False, "go-build123")
        False
    """

    def __init__(self, rules: MatchRules = DEFAULT_RULES) -> None:
        self._rules = rules
        self._file_regexes = tuple(re.compile(p) for p in rules.file_patterns)

    @property
    def rules(self) -> MatchRules:
        """Rule set this matcher evaluates."""
        return self._rules

    def is_eligible(self, is_directory: bool, name: str) -> bool:
        """Check a single entry against the rule set.

        Args:
            is_directory: Whether the entry is a directory.
            name: Entry name (basename).

        Returns:
            True if the entry may be deleted.
        """
        if is_directory:
            if name == self._rules.dir_exact_name:
                return True
            return name.startswith(self._rules.dir_prefixes)

        if name.startswith(self._rules.file_prefixes):
            return True
        return any(regex.fullmatch(name) for regex in self._file_regexes)
