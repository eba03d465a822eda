"""Get the path to the error handler module."""

import traceback

__all__ = ["get_error_path"]


def get_error_path(err: Exception) -> str:
    """Extract formatted source location from an exception traceback.

    Focuses on the taskboard package path and formats the output as a path
    string with file location, line number, and function name.

    Args:
        err: The raised exception carrying traceback information

    Returns:
        A formatted string containing the error's source location in the format:
        "filename:line (fn:function_name)", or "unknown" without a traceback.
    """
    frames = traceback.extract_tb(err.__traceback__)
    if not frames:
        return "unknown"
    filename, line, func, _ = frames[-1]

    app_path = filename.split("taskboard")[-1] if "taskboard" in filename else filename
    filename = f"taskboard{app_path}"
    return f"{filename}:{line} (fn:{func})"
