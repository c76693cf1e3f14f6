import math
import re
import numpy as np

# --- POINT CONFIGURATION ---
HARDEN_RHO = False # when True, rho is recomputed with hypot(x, y) instead of y/sin(theta)

# --- DEMO CONFIGURATION ---
COLOR_OUTPUT = True
SHOW_PLOTS = False
TRACE_CALLS = True # False runs the join point demo without hooks
PLOT_RMAX_PADDING = 1.1

def resume_color(text, color):
    # replace all instances of "\033[0m" with the target color
    return text.replace("\033[0m", color)

def red(text):
    color = "\033[91m"
    return f"{color}{resume_color(text, color)}\033[0m"

def orange(text):
    color = "\033[38;5;208m"
    return f"{color}{resume_color(text, color)}\033[0m"

def yellow(text):
    color = "\033[93m"
    return f"{color}{resume_color(text, color)}\033[0m"

def green(text):
    color = "\033[92m"
    return f"{color}{resume_color(text, color)}\033[0m"

def purple(text):
    color = "\033[95m"
    return f"{color}{resume_color(text, color)}\033[0m"

def cyan(text):
    color = "\033[96m"
    return f"{color}{resume_color(text, color)}\033[0m"

def print_error(text="Undefined error"):
    pprint(f"{red('ERROR')}: {text}")

def print_warning(text="Undefined warning"):
    pprint(f"{yellow('WARNING')}: {text}")

def pprint(x):
    """Print pretty with formatting and colors."""
    string = str(x)
    if not COLOR_OUTPUT:
        print(string)
        return

    # color and shorten validity flags
    string = string.replace("True", green('T'))
    string = string.replace("False", red('F'))

    # float special values leaking out of the rho recompute
    string = re.sub(r"(?<!\w)(-?inf|nan)\b", lambda m: orange(m.group(1)), string)

    print(string)

def rectangular_to_polar(x, y, harden=False):
    """
    Convert (x, y) to (theta, rho) with theta in radians.

    rho is recovered as y/sin(theta), so a theta of exactly 0 gives 0/0 = nan.
    numpy is used so the division follows IEEE rules instead of raising ZeroDivisionError.
    Args:
        harden: use hypot(x, y) for rho, which is defined everywhere.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        theta = np.arctan2(np.float64(y), np.float64(x))
        if harden:
            rho = np.hypot(np.float64(x), np.float64(y))
        else:
            rho = np.float64(y) / np.sin(theta)
    return float(theta), float(rho)

def polar_to_rectangular(theta, rho):
    """Convert (theta, rho) with theta in radians to (x, y)."""
    with np.errstate(invalid="ignore"):
        theta = np.float64(theta)
        x = np.float64(rho) * np.cos(theta)
        y = np.float64(rho) * np.sin(theta)
    return float(x), float(y)

def is_finite_pair(a, b):
    return math.isfinite(a) and math.isfinite(b)
