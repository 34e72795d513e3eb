"""Project key hashing.

The key identifies "the same upload" without hashing file content. The hash is
a 32-bit djb2 variant over UTF-16 code units, so keys line up with those saved
by the browser front end.
"""

_MASK_32 = 0xFFFFFFFF


def djb2_hex(text: str) -> str:
    """Return the unsigned 32-bit djb2-xor hash of ``text`` as lowercase hex."""
    data = text.encode("utf-16-le")
    value = 5381
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        value = ((value * 33) & _MASK_32) ^ code_unit
    return format(value, "x")


def compute_project_key(first_cell: str, size: int, last_modified: int) -> str:
    """Build the project key from the Abs sheet's first cell and file metadata."""
    return djb2_hex(f"{first_cell}|{size}|{last_modified}")
