"""
Command-line entrypoint.

Sub-commands:
- serve: run the HTTP server in the foreground
- batch: start a server process and run every operation of a file against it
- keys: feed keypad symbols to the input tracker and print the display
"""

import argparse
from multiprocessing import Process
from pathlib import Path
import time
from typing import Literal, Optional

from pydantic import BaseModel, Field, FilePath, IPvAnyAddress, ValidationError

from arithmetic_calculator.client.client import ArithmeticClient
from arithmetic_calculator.client.state import Evaluator, InputTracker
from arithmetic_calculator.common.operations import evaluate_symbol
from arithmetic_calculator.server.server import ArithmeticServer


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    command : str
        Sub-command to run.
    host, port :
        Server address, shared by the server and the client.
    file_path : FilePath, optional
        File or archive with one operation per line (``batch``).
    sequence : str, optional
        Whitespace separated keypad symbols (``keys``).
    remote : bool
        Evaluate ``keys`` through the HTTP server instead of locally.
    """

    command: Literal["serve", "batch", "keys"]
    host: IPvAnyAddress = "127.0.0.1"
    port: int = Field(default=9000, ge=1, le=65535)
    file_path: Optional[FilePath] = None
    sequence: Optional[str] = None
    remote: bool = False


def run_server(host: str, port: int) -> None:
    """
    Start the arithmetic server.

    The server runs in its own process for ``batch``.
    """
    ArithmeticServer(host=host, port=port).start()


def build_parser() -> argparse.ArgumentParser:
    # Accepted before or after the sub-command; defaults come from CliArgs
    address = argparse.ArgumentParser(add_help=False)
    address.add_argument("--host", default=argparse.SUPPRESS, help="Server host address (default: 127.0.0.1)")
    address.add_argument("--port", type=int, default=argparse.SUPPRESS, help="Server TCP port (default: 9000)")

    parser = argparse.ArgumentParser(description="Arithmetic calculator server and client", parents=[address])
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("serve", parents=[address], help="Run the HTTP server")

    batch = subparsers.add_parser("batch", parents=[address], help="Run the operations of a file against a fresh server")
    batch.add_argument("file_path", help="Text file or archive (.zip, .tar.xz, .7z) of operations")

    keys = subparsers.add_parser("keys", parents=[address], help="Feed keypad symbols to the calculator")
    keys.add_argument("sequence", help='Keypad symbols separated by spaces, e.g. "5 + 3 = ="')
    keys.add_argument("--remote", action="store_true", help="Evaluate through the HTTP server")
    return parser


def parse_args(argv: Optional[list[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return CliArgs(**{key: value for key, value in vars(args).items() if value is not None})
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct the output file path for a batch input file.

    Examples
    --------
    input: resources/operations.7z
    output: resources/operations_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    if input_path.suffixes == [".txt"]:
        suffix_safe = ""
    stem = input_path.name.split(".")[0]
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def run_keys(cli_args: CliArgs) -> list[str]:
    """
    Feed the symbols of ``cli_args.sequence`` to a fresh tracker.

    :return: Display text after each symbol, prefixed with "M" while memory is nonzero
    :rtype: list[str]
    """
    evaluator: Evaluator = evaluate_symbol
    if cli_args.remote:
        evaluator = ArithmeticClient(host=cli_args.host, port=cli_args.port).evaluate
    tracker = InputTracker(evaluator=evaluator)
    lines: list[str] = []
    for symbol in cli_args.sequence.split():
        display = tracker.press(symbol)
        lines.append(f"M {display}" if tracker.memory_indicator else display)
    return lines


def run_batch(cli_args: CliArgs) -> Path:
    input_path = Path(cli_args.file_path)
    output_path = build_output_path(input_path)

    server_process = Process(target=run_server, args=(str(cli_args.host), cli_args.port))
    server_process.start()

    # Give the server time to start listening
    time.sleep(1)

    try:
        client = ArithmeticClient(host=cli_args.host, port=cli_args.port)
        client.send_file(input_path, output_path)
    finally:
        # Ensure the server is always stopped
        server_process.terminate()
        server_process.join()
    return output_path


def main(argv: Optional[list[str]] = None) -> None:
    cli_args = parse_args(argv)

    if cli_args.command == "serve":
        run_server(str(cli_args.host), cli_args.port)
    elif cli_args.command == "batch":
        print(run_batch(cli_args))
    else:
        for line in run_keys(cli_args):
            print(line)


if __name__ == "__main__":
    main()
