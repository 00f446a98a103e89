"""
Byte-size parsing and rendering.

Sizes are stored the way users type them ("10GB", "512MiB", "2048").
Decimal suffixes scale by powers of 1000, binary ones by powers of 1024.
"""

SI_MULTIPLIERS = {
    "kB": 1000,
    "MB": 1000 ** 2,
    "GB": 1000 ** 3,
    "TB": 1000 ** 4,
    "PB": 1000 ** 5,
    "EB": 1000 ** 6,
}

IEC_MULTIPLIERS = {
    "KiB": 1024,
    "MiB": 1024 ** 2,
    "GiB": 1024 ** 3,
    "TiB": 1024 ** 4,
    "PiB": 1024 ** 5,
    "EiB": 1024 ** 6,
}

IEC_UNITS = ["KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]


class ByteSizeParseError(ValueError):
    """Raised when a string is not a valid byte size."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: '{value}'")


def parse_byte_size_string(value: str) -> int:
    """
    Convert a human-readable size into a byte count.

    Args:
        value: Size string such as "10GB", "512MiB", "100B", "100 bytes" or
            "4096". Surrounding whitespace is ignored; an empty string counts
            as zero bytes.

    Returns:
        The size in bytes.

    Raises:
        ByteSizeParseError: If the number or the suffix is invalid.

    Example:
        >>> parse_byte_size_string("5GB")
        5000000000
        >>> parse_byte_size_string("1MiB")
        1048576
    """
    text = value.strip()
    if text == "":
        return 0

    # Split at the first non-digit character
    digits_end = 0
    while digits_end < len(text) and text[digits_end] in "0123456789":
        digits_end += 1

    number, suffix = text[:digits_end], text[digits_end:]
    if not number:
        raise ByteSizeParseError(value, "Invalid value")

    amount = int(number)
    if suffix in ("", "B", " bytes"):
        return amount

    multiplier = SI_MULTIPLIERS.get(suffix) or IEC_MULTIPLIERS.get(suffix)
    if multiplier is None:
        raise ByteSizeParseError(value, f"Invalid suffix '{suffix}'")

    return amount * multiplier


def get_byte_size_string_iec(size: int, precision: int = 1) -> str:
    """
    Render a byte count with binary units.

    Values below 1 KiB are printed as whole bytes.

    Example:
        >>> get_byte_size_string_iec(512)
        '512B'
        >>> get_byte_size_string_iec(8000000000)
        '7.5GiB'
    """
    if size < 1024:
        return f"{size}B"

    value = float(size)
    for unit in IEC_UNITS:
        value = value / 1024
        if value < 1024:
            return f"{value:.{precision}f}{unit}"

    return f"{value:.{precision}f}EiB"
