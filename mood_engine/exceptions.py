# mood_engine/exceptions.py
"""
Exceptions shared across the project.

- ConfigError      : environment / settings problems
- LexiconLoadError : mood lexicon YAML could not be loaded or failed validation
- InvalidArgument  : caller passed a value of the wrong kind (unknown mood, bad top_n ...)
- EntryDataError   : batch input file (xlsx/csv/yaml) could not be read
"""

class ConfigError(RuntimeError):
    """Environment configuration (.env, paths) problem."""
    pass


class LexiconLoadError(IOError):
    """Mood lexicon file is missing, malformed or inconsistent."""
    pass


class InvalidArgument(ValueError):
    """Caller misuse: an unrecognized mood label or an out-of-range parameter."""
    pass


class EntryDataError(ValueError):
    """Journal entry file could not be read or has no usable columns."""
    pass
