"""
Defines the :py:class:`config` directives and the :py:class:`Configuration` they act on.
"""
from dataclasses import dataclass, replace
from enum import Enum


class config(Enum):
    case_sensitive = "case_sensitive"
    case_insensitive = "case_insensitive"
    no_space_for_short_options = "no_space_for_short_options"
    no_space_only_for_short_numeric_options = "no_space_only_for_short_numeric_options"
    bundling = "bundling"
    no_bundling = "no_bundling"
    pass_through = "pass_through"
    no_pass_through = "no_pass_through"
    stop_on_first_non_option = "stop_on_first_non_option"


@dataclass(frozen=True)
class Configuration:
    """
    The running configuration of a single parse. Directives never mutate a
    configuration, they produce a new one.

    >>> Configuration().apply(config.bundling).apply(config.case_sensitive)
    Configuration(case_sensitive=True, bundling=True, no_space_only_for_short_numeric_options=False, pass_through=False, stop_on_first_non_option=False)
    """

    case_sensitive: bool = False
    bundling: bool = False
    no_space_only_for_short_numeric_options: bool = False
    pass_through: bool = False
    stop_on_first_non_option: bool = False

    def apply(self, directive: config) -> "Configuration":
        if directive is config.case_sensitive:
            return replace(self, case_sensitive=True)
        if directive is config.case_insensitive:
            return replace(self, case_sensitive=False)
        if directive is config.no_space_for_short_options:
            return replace(self, no_space_only_for_short_numeric_options=False)
        if directive is config.no_space_only_for_short_numeric_options:
            return replace(self, no_space_only_for_short_numeric_options=True)
        if directive is config.bundling:
            return replace(self, bundling=True)
        if directive is config.no_bundling:
            return replace(self, bundling=False)
        if directive is config.pass_through:
            return replace(self, pass_through=True)
        if directive is config.no_pass_through:
            return replace(self, pass_through=False)
        if directive is config.stop_on_first_non_option:
            return replace(self, stop_on_first_non_option=True)
        raise RuntimeError(f"Unknown directive {directive!r}")
