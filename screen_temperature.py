"""
Screen Temperature - set or estimate the color temperature of the display
"""
import sys

from GammaScripts.cli import main


if __name__ == "__main__":
    sys.exit(main())
