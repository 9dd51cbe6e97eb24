"""
Command-line interface for the morphology tool.
Usage:
	morph lena.jpg
	morph lena.jpg erode
"""

import argparse
import os
import sys
from typing import List, Optional

from .core.base import Operation, MorphResult
from .core.config import get_default_config
from .core.errors import (
	MorphError,
	UsageError,
	ImageLoadError,
	InvalidOperationError,
	OutputWriteError
)
from .core.pipeline import MorphPipeline
from .utils.logger import get_logger


USAGE = "Usage: {prog} <Input image> [" + "|".join(Operation.names()) + "]"


class ArgumentParser(argparse.ArgumentParser):
	"""Argument parser that raises UsageError instead of exiting."""

	def error(self, message):
		raise UsageError(message)


def build_parser(prog: Optional[str] = None) -> ArgumentParser:
	parser = ArgumentParser(
		prog=prog,
		description='Apply a morphological operation with an 11x11 rectangular element and write output.png',
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog="""
Examples:
  # Dilate (default)
  %(prog)s lena.jpg

  # Erode
  %(prog)s lena.jpg erode
		"""
	)

	parser.add_argument('input', help='Input image path')
	parser.add_argument(
		'operation',
		nargs='?',
		default=Operation.DILATE.value,
		help=f"Morph operation: {' or '.join(Operation.names())} (default: {Operation.DILATE.value})"
	)
	parser.add_argument('-v', '--verbose', action='store_true', help='Verbose logging on stderr')

	return parser


def print_usage(prog: str) -> None:
	print(USAGE.format(prog=prog))


def print_timing(result: MorphResult) -> None:
	print(f"Time taken to {result.operation.value}: {result.microseconds} microseconds")


def main(argv: Optional[List[str]] = None, prog: Optional[str] = None) -> int:
	"""
	Main entry point.
	Args:
		argv: Arguments without the program name (default: sys.argv[1:])
		prog: Program name shown in usage text (default: basename of sys.argv[0])
	Returns:
		Exit code: 0 on success, 1 on any error, 130 when interrupted
	"""
	prog = prog or os.path.basename(sys.argv[0]) or 'morph'
	parser = build_parser(prog)

	try:
		args = parser.parse_args(argv)
	except UsageError as e:
		print(f"Error: {e}")
		print_usage(prog)
		return 1

	config = get_default_config()
	if args.verbose:
		config.log_level = "DEBUG"
	logger = get_logger("morphcli", config.log_level)

	pipeline = MorphPipeline(config)

	try:
		pipeline.run(args.input, args.operation, on_transformed=print_timing)
	except ImageLoadError as e:
		logger.debug(str(e))
		print("Could not open or find the image!\n")
		print_usage(prog)
		return 1
	except InvalidOperationError as e:
		logger.debug(str(e))
		print("Invalid morph operation!\n")
		print_usage(prog)
		return 1
	except OutputWriteError as e:
		logger.error(str(e))
		print("Could not write the output image!")
		return 1
	except MorphError as e:
		print(f"Error: {e}")
		return 1
	except KeyboardInterrupt:
		print("\n\nInterrupted by user")
		return 130
	except Exception as e:
		print(f"\nError: {e}")
		if args.verbose:
			logger.exception("Unexpected failure")
		return 1

	return 0


if __name__ == '__main__':
	sys.exit(main())
