"""主程序入口 - 直接对Token求值，或回放键盘按键"""
import argparse
import logging
import sys

from calculator import Evaluator
from config.config import LOG_CONFIG, validate_config
from core import CalculationError
from keypad import KeypadSession, format_number

logger = logging.getLogger(__name__)


def _print_session(session):
    print(f"expression: {session.expression_line}")
    result = session.result if session.result is not None else 0.0
    print(f"result:     {format_number(result)}")
    print(f"input:      {format_number(session.current_number)}")


def run_tokens(tokens, strict=True):
    """对命令行给出的Token求值并打印结果"""
    with Evaluator(strict=strict) as evaluator:
        evaluator.set_expression(tokens)
        result = evaluator.evaluate()
    logger.info(f"Evaluated {' '.join(tokens)} -> {result}")
    print("None" if result is None else format_number(result))
    return result


def run_keys(keys, strict=True):
    with Evaluator(strict=strict) as evaluator:
        session = KeypadSession(evaluator)
        session.replay(keys)
        _print_session(session)
    if session.last_error is not None:
        raise session.last_error
    return session.result


def run_interactive(strict=True):
    """逐行读取按键，空行或 q 退出"""
    with Evaluator(strict=strict) as evaluator:
        session = KeypadSession(evaluator)
        for line in sys.stdin:
            line = line.strip()
            if not line or line.lower() == "q":
                break
            try:
                session.replay(line)
            except ValueError as e:
                print(f"Error: {e}")
                continue
            if session.last_error is not None:
                print(f"Error: {session.last_error}")
            _print_session(session)


def build_parser():
    parser = argparse.ArgumentParser(description="Interactive arithmetic evaluator")

    parser.add_argument(
        "tokens",
        nargs="*",
        help="Expression tokens, e.g. 2 + 3 '*' 4"
    )
    parser.add_argument(
        "--keys",
        type=str,
        default=None,
        help="Replay keypad keys, e.g. '12+3×4=' (A clears)"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Read keypad keys line by line from stdin"
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Store an empty result instead of raising when the expression cannot be folded"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOG_CONFIG["level"],
        help="Logging level (default: INFO)"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format=LOG_CONFIG["format"]
    )
    validate_config()
    strict = not args.lenient

    try:
        if args.interactive:
            run_interactive(strict)
        elif args.keys is not None:
            run_keys(args.keys, strict)
        elif args.tokens:
            run_tokens(args.tokens, strict)
        else:
            build_parser().print_usage()
            return 2
    except CalculationError as e:
        print(f"Error: {e}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
