#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf_builder/utils/io_utils.py
"""I/O helpers for writing rendered documents."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from adf_builder.constants import DEFAULT_OUTPUT_ENCODING


def _is_binary_stream(output: object) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    # Fall back to the mode attribute of file objects
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(
    content: Union[str, bytes],
    output: Union[str, Path, IO[bytes], IO[str], None],
    encoding: str = DEFAULT_OUTPUT_ENCODING,
) -> Union[StringIO, BytesIO, None]:
    """Write content to an output destination or return it as a file-like object.

    Parameters
    ----------
    content : str or bytes
        Content to write
    output : str, Path, IO[bytes], IO[str], or None
        Output destination. Can be:
        - None: Returns content as StringIO (for str) or BytesIO (for bytes)
        - str or Path: Writes content to the file at that path
        - IO[bytes]: Writes encoded content to a binary stream
        - IO[str]: Writes decoded content to a text stream
    encoding : str, default = "utf-8"
        Encoding used when converting between str and bytes

    Returns
    -------
    StringIO, BytesIO, or None
        A file-like object when ``output`` is None, otherwise None

    Raises
    ------
    TypeError
        If the content or output type is not supported

    Examples
    --------
        >>> write_content('{"version": 1}', None).read()
        '{"version": 1}'
        >>> buffer = BytesIO()
        >>> write_content("text", buffer)
        >>> buffer.getvalue()
        b'text'

    """
    if not isinstance(content, (str, bytes)):
        raise TypeError(f"Content must be str or bytes, got {type(content)}")

    if output is None:
        return StringIO(content) if isinstance(content, str) else BytesIO(content)

    if isinstance(output, (str, Path)):
        output_path = Path(output)
        if isinstance(content, str):
            output_path.write_text(content, encoding=encoding)
        else:
            output_path.write_bytes(content)
        return None

    if hasattr(output, "write"):
        if _is_binary_stream(output):
            binary_output = cast(IO[bytes], output)
            binary_output.write(content.encode(encoding) if isinstance(content, str) else content)
        else:
            text_output = cast(IO[str], output)
            text_output.write(content.decode(encoding) if isinstance(content, bytes) else content)
        return None

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["write_content"]
