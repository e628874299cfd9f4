from typing import List


def logging_path(opts: List[str]) -> str:
    """Return the value of the first ``path=<file>`` log option, or ""."""
    for opt in opts:
        arr = opt.split("=", 1)
        if len(arr) == 2 and arr[0].strip() == "path":
            return arr[1].strip()
    return ""
