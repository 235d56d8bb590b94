"""Custom exceptions for split-ide.

This module defines the exception hierarchy for split-ide. The layout store
itself never raises: invalid pane ids and structural violations are no-ops.
These exceptions cover the surrounding pieces (configuration, the file
collection) and explicit invariant checks.

Example:
    ```python
    from split_ide.exceptions import SplitIdeError, ConfigError

    try:
        settings = parse_layout_section(data)
    except ConfigError as e:
        print(f"Configuration error: {e}")
    ```
"""


class SplitIdeError(Exception):
    """Base exception for all split-ide errors.

    All exceptions raised by split-ide inherit from this class,
    making it easy to catch all library-specific errors.
    """

    pass


class ConfigError(SplitIdeError):
    """Error related to configuration loading or validation.

    Raised when:
    - A configuration value has the wrong type
    - A configuration value is out of range
    """

    pass


class FileOperationError(SplitIdeError):
    """Error raised by the in-memory file collection.

    Raised when:
    - A file id does not exist in the collection
    """

    pass


class LayoutError(SplitIdeError):
    """A pane tree violates one of its structural invariants.

    Only raised by explicit invariant checks, never by store operations.
    """

    pass
