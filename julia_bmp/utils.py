# julia_bmp/utils.py

def parse_complex(s: str) -> complex:
    """
    Parse strings like '-0.8+0.156j', '-0.8,0.156' or '0.3' into a complex number.
    """
    s = s.strip().lower().replace(" ", "")
    if "," in s:
        re, im = s.split(",", 1)
        return complex(float(re), float(im))
    if s.endswith("j"):
        return complex(s)
    # allow plain real numbers too
    return complex(float(s), 0.0)