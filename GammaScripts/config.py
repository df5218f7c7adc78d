"""
Constants and Configuration for Screen Temperature
"""

VERSION = "1.7.1"

# Temperatures (Kelvin)
TEMPERATURE_NORM = 6500   # Neutral white point, all gains 1.0
TEMPERATURE_ZERO = 700    # Below this the analytic model has no green/blue left

# Whitepoint table range
TABLE_MIN = 1000
TABLE_MAX = 10000
TABLE_STEP = 500

# Polynomial estimates are reported to the nearest 100K
POLYNOMIAL_ROUND_STEP = 100

# Full scale of a 16-bit gamma ramp sample
GAMMA_MULT = 65535.0

# Approximation of the redshift whitepoint table without limits:
# GAMMA = K0 + K1 * ln(T - T0)
# Red range (T0 = TEMPERATURE_ZERO)
GAMMA_K0GR = -1.47751309139817   # green
GAMMA_K1GR = 0.28590164772055
GAMMA_K0BR = -4.38321650114872   # blue
GAMMA_K1BR = 0.6212158769447
# Blue range (T0 = TEMPERATURE_NORM - TEMPERATURE_ZERO)
GAMMA_K0RB = 1.75390204039018    # red
GAMMA_K1RB = -0.1150805671482
GAMMA_K0GB = 1.49221604915144    # green
GAMMA_K1GB = -0.07513509588921

# Quadratic fit of temperature against (r, g, b) gains:
# T = C0 + CR1*r + CR2*r^2 + CG1*g + CG2*g^2 + CB1*b + CB2*b^2
POLY_C0 = 64465
POLY_CR1 = -109049
POLY_CR2 = 46013
POLY_CG1 = -4322
POLY_CG2 = 10708
POLY_CB1 = -2662
POLY_CB2 = 1355

# Debug settings
DEBUG_LOGGING = False  # Set to True for verbose logging

# CSV diagnostics
LOG_HEADER = "timestamp,screen,crtc,size,red,green,blue\n"

# Ramp chart settings
CHART_SIZE = (6, 3.2)
CHART_DPI = 100

# Colors for chart lines (red, green, blue channel)
LINE_COLORS = ("#f87171", "#34d399", "#60a5fa")
LINE_STYLES = ("-", "--", ":", "-.")

# Theme colors
THEME_CHART_BG = "#1b1b1b"
THEME_GRID = "#333333"
THEME_TEXT = "#cccccc"
