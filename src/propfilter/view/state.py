"""Display state shared by the views, held in context variables."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Default is True (show headers)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Default is False (allow wrapping)
_no_wrap_var: ContextVar[bool] = ContextVar("no_wrap", default=False)


def set_show_header(value: bool) -> None:
    """Set whether headers should be displayed above tables.

    Args:
        value: True to show headers, False to hide them
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_no_wrap(value: bool) -> None:
    _no_wrap_var.set(value)


def get_no_wrap() -> bool:
    return _no_wrap_var.get()
