"""
Command line interface for Screen Temperature
"""
import argparse
import re

from .config import VERSION, TEMPERATURE_NORM
from .controller import ColorTemperature
from .display import open_display
from .errors import DisplayError
from .logger import Logger
from .models import DEFAULT_MODEL, MODELS, get_model
from .ramp_chart import RampChart

DESCRIPTION = f"""Screen Temperature ({VERSION})

If the temperature is 0, the display is reset to the default temperature ({TEMPERATURE_NORM}K).
If no temperature is passed, the current display temperature is estimated."""

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class UsageError(Exception):
    pass


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def parse_int(text):
    """Leading integer of text, 0 when there is none (like C atoi)"""
    match = _LEADING_INT.match(text or "")
    return int(match.group(1)) if match else 0


def build_parser():
    parser = ArgumentParser(
        prog="screen-temperature",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("temperature", nargs="?", type=parse_int,
                        help="temperature in Kelvin, or the offset in delta mode")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="display debugging information")
    parser.add_argument("-d", "--delta", action="store_true",
                        help="shift temperature by the given value")
    parser.add_argument("-s", "--screen", type=parse_int, default=-1, metavar="N",
                        help="only act on screen N")
    parser.add_argument("-c", "--crtc", "--crts", type=parse_int, default=-1, metavar="N",
                        help="only act on CRTC N of each screen")
    parser.add_argument("-m", "--model", choices=sorted(MODELS), default=DEFAULT_MODEL,
                        help="temperature model (default: %(default)s)")
    parser.add_argument("--display", metavar="NAME",
                        help="X display to connect to (default: $DISPLAY)")
    parser.add_argument("--log", metavar="PATH",
                        help="append decoded and applied gains to a CSV file")
    parser.add_argument("--plot", metavar="PATH",
                        help="save a chart of the resulting gamma ramps")
    return parser


def run(args, display, logger):
    """Carry out one parsed command on an open display"""
    sct = ColorTemperature(display, get_model(args.model), logger)
    screens = display.screen_count()
    crtc = args.crtc if args.crtc >= 0 else None

    if args.screen >= screens:
        logger.error(f"Invalid screen index: {args.screen}")
        return
    targets = sct.screens(args.screen if args.screen >= 0 else None)

    if args.temperature is None and not args.delta:
        # No temperature, so print the estimate for each screen
        for screen in targets:
            estimate = sct.estimate(screen, crtc)
            logger.log(f"Screen {screen}: temperature ~ {estimate.temperature}")
    elif not args.delta:
        temp = args.temperature if args.temperature != 0 else TEMPERATURE_NORM
        for screen in targets:
            sct.apply(screen, temp, crtc)
    else:
        for screen in targets:
            sct.shift(screen, args.temperature, crtc)

    if args.plot:
        chart = RampChart(f"Gamma ramps ({args.model})")
        chart.add_display(display, targets)
        chart.save(args.plot)
        logger.debug(f"Ramp chart written to {args.plot}")


def main(argv=None):
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        if args.delta and args.temperature is None:
            raise UsageError("Needed parameter temperature not specified!")
    except UsageError as e:
        Logger().error(e)
        parser.print_help()
        return 0

    logger = Logger(verbose=args.verbose)
    if args.log:
        logger.open_log_file(args.log)

    try:
        with open_display(args.display) as display:
            run(args, display, logger)
    except DisplayError as e:
        logger.error(f"{e}. Make sure DISPLAY is set correctly.")
        return 1
    finally:
        logger.close_log_file()

    return 0
