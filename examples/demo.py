# demo.py

import argparse
import asyncio

from dotanim import DotAnimator, Logger, ScopedDotAnimator, TerminalSink


async def run(args) -> None:
    logger = Logger("dotanim.demo", args.enable_logging, args.log_file)
    sink = TerminalSink(color=args.color)

    if args.manual:
        animator = DotAnimator.start(sink, args.text, args.interval,
                                     args.max_dots, not args.no_pad, logger)
        await asyncio.sleep(args.duration)
        animator.stop()
        await animator.wait_for_completion()
    else:
        async with ScopedDotAnimator.start(sink, args.text, args.interval,
                                           args.max_dots, not args.no_pad, logger):
            await asyncio.sleep(args.duration)

    sink.finish(f"{args.text} done.")


def main():
    parser = argparse.ArgumentParser(description='Dot animation demo')
    parser.add_argument('-t', '--text', default='Loading',
        help='Base text to animate')
    parser.add_argument('-i', '--interval', type=float, default=0.5,
        help='Seconds between frames')
    parser.add_argument('-m', '--max-dots', type=int, default=3,
        help='Dots before the cycle wraps')
    parser.add_argument('--no-pad', action='store_true',
        help='Do not pad frames to a constant width')
    parser.add_argument('-c', '--color',
        help='Frame color (GREEN, PINK, BLUE, GRAY, YELLOW, WHITE)')
    parser.add_argument('-d', '--duration', type=float, default=3.0,
        help='Seconds to animate for')
    parser.add_argument('--manual', action='store_true',
        help='Use the manually stopped animator')
    parser.add_argument('--enable-logging', action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')

    args = parser.parse_args()
    asyncio.run(run(args))

if __name__ == "__main__":
    main()
