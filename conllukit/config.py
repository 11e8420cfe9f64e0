"""
Configuration classes for conllukit.
"""

from dataclasses import dataclass

from .storage import get_default_output_format, get_missing_target, get_strict_parsing


@dataclass
class ConllukitConfig:
    """Effective settings for parsing, editing and writing."""
    strict_parsing: bool = True  # Reject unrecognized lines and detached multiword children
    missing_target: str = "ignore"  # 'ignore' or 'error' when expand/collapse finds no target
    default_output_format: str = "conllu"

    @property
    def missing_ok(self) -> bool:
        return self.missing_target != "error"

    @classmethod
    def load(cls) -> "ConllukitConfig":
        """Build the settings from the config file, falling back to the defaults."""
        return cls(
            strict_parsing=get_strict_parsing(),
            missing_target=get_missing_target(),
            default_output_format=get_default_output_format() or "conllu",
        )
