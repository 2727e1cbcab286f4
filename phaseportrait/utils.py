# phaseportrait/utils.py


def parse_complex(s: str) -> complex:
    """
    Parse strings like '0.3+0.5j', '-0.4-0.6i', '2j' or '1.5' into a complex number.
    """
    s = s.strip().lower().replace(" ", "")
    if not s:
        raise ValueError("Empty complex literal")
    if s.endswith("i"):
        s = s[:-1] + "j"
    return complex(s)


def bounded_size(n: int, vmax: int) -> int:
    """Pixel count for one image side: at least 1 is required, anything above vmax is cut to vmax."""
    if n < 1:
        raise ValueError(f"Image size must be at least 1 pixel, got {n}")
    return min(int(n), vmax)
