"""
Utility functions and error handling for XML file operations.
"""

import time
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import structlog

from .types import InputMissingError, PathLike

logger = structlog.get_logger(__name__)


@contextmanager
def safe_xml_operation(operation: str, path: Optional[PathLike] = None, **context):
    """
    Context manager for XML file operations with automatic error logging.

    Args:
        operation: Description of the operation
        path: Optional file path the operation works on
        **context: Extra fields bound to the log entries
    """
    op_logger = logger.bind(
        operation=operation,
        path=str(path) if path is not None else None,
        **context,
    )

    start_time = time.time()
    op_logger.debug(f"Starting {operation}")

    try:
        yield op_logger
        processing_time = time.time() - start_time
        op_logger.info(f"Completed {operation}", processing_time=processing_time)
    except Exception as e:
        processing_time = time.time() - start_time
        op_logger.error(
            f"Failed {operation}",
            error=str(e),
            error_type=type(e).__name__,
            processing_time=processing_time,
            exc_info=True,
        )
        raise


def validate_input_path(path: PathLike) -> Path:
    """
    Validate and normalize an XML input path.

    Args:
        path: Path to XML file

    Returns:
        Validated Path object

    Raises:
        InputMissingError: If the path is not an existing regular file
    """
    try:
        input_path = Path(path)
    except TypeError as e:
        raise InputMissingError(f"Invalid XML path: {e}", path) from e

    if not input_path.exists():
        raise InputMissingError(f"XML file does not exist: {input_path}", input_path)

    if not input_path.is_file():
        raise InputMissingError(f"Path is not a file: {input_path}", input_path)

    return input_path


def is_empty_file(path: Path) -> bool:
    return path.stat().st_size == 0
