import os


def read(key: str) -> tuple[str, bool]:
    """Read a raw environment value

    Args:
        key: Environment variable name

    Returns:
        ``(raw, present)``; an unset variable and one set to the empty
        string both come back as ``("", False)``
    """
    raw = os.environ.get(key, "")
    return raw, raw != ""
