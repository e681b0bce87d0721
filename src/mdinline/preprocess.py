"""Line preprocessing: physical lines to logical lines.

Wrapped prose arrives as several physical lines that belong to one
sentence. ``wrap`` joins continuation lines onto the line before them and
starts a new logical line only after a line that ends in a period.

Only a trailing ASCII ``.`` counts; ``!``, ``?`` and closing quotes do
not flush.

Example:
    >>> wrap(["The cat", "sat on the mat."])
    ['The cat sat on the mat.']
    >>> wrap(["The cat sat.", "on the mat"])
    ['The cat sat.', 'on the mat']
"""

from collections.abc import Iterable


def wrap(lines: Iterable[str]) -> list[str]:
    """Fold physical lines into logical lines.

    Args:
        lines: Physical lines in source order

    Returns:
        Logical lines in source order. A trailing accumulator is always
        flushed, so ``[""]`` yields ``[""]``.
    """
    current = ""
    output: list[str] = []
    for line in lines:
        if not current:
            current = line
        elif current.endswith("."):
            output.append(current)
            current = line
        else:
            current = f"{current} {line}"
    output.append(current)
    return output
