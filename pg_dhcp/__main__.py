"""
Entry point for pg-dhcp tools.

Usage:
    python -m pg_dhcp tokens /etc/pg-dhcp/dhcp.conf
    python -m pg_dhcp pool-stats --address 127.0.0.1:8677
    python -m pg_dhcp status
    python -m pg_dhcp --help
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config.lexer import Lexer
from .config.tokens import TokenType
from .logging import get_logger, setup_logging_from_args
from .rpc.client import RPCClient, RPCConfig, RPCError


logger = get_logger("main")


def dump_tokens(config_path: str) -> int:
    """Print the token stream of a configuration file."""
    path = Path(config_path)
    if not path.is_file():
        print(f"Configuration file not found: {path}", file=sys.stderr)
        return 1

    illegal = 0
    with open(path, "rb") as f:
        for tok in Lexer(f):
            print(f"{tok.line:>5}  {tok.type.name:<20} {tok.value!r}")
            if tok.type == TokenType.ILLEGAL:
                illegal += 1
                logger.error(f"Line {tok.line}: illegal literal {tok.raw!r}")

    if illegal:
        print(f"\n{illegal} illegal token(s) found", file=sys.stderr)
        return 1
    return 0


def show_pool_stats(config: RPCConfig) -> int:
    """Print lease statistics of every pool."""
    try:
        with RPCClient.connect(config) as client:
            stats = client.server.get_pool_stats()
    except RPCError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not stats:
        print("No pools")
        return 0

    print(f"{'Network':<20} {'Subnet':<18} {'Reg':<4} {'Total':>6} {'Active':>6} "
          f"{'Claimed':>7} {'Aband.':>6} {'Free':>6} {'Used':>6}")
    for stat in stats:
        print(
            f"{stat.network_name:<20} {stat.subnet:<18} {'yes' if stat.registered else 'no':<4} "
            f"{stat.total:>6} {stat.active:>6} {stat.claimed:>7} {stat.abandoned:>6} "
            f"{stat.free:>6} {stat.utilization:>6.1%}"
        )
    return 0


def show_status(config: RPCConfig) -> int:
    """Print the memory/process status of the server."""
    try:
        with RPCClient.connect(config) as client:
            status = client.server.mem_status()
    except RPCError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Goroutines:     {status.go_routines}")
    print(f"Uptime:         {status.uptime:.0f}s")
    print(f"Heap allocated: {status.memory.heap_alloc_mb:.2f} MB")
    print(f"Allocated:      {status.memory.alloc_mb:.2f} MB")
    print(f"System:         {status.memory.sys_mb:.2f} MB")
    print(f"GC cycles:      {status.memory.num_gc}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pg-dhcp",
        description="DHCP server configuration lexer and administrative client",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    tokens = commands.add_parser("tokens", help="Print the token stream of a configuration file")
    tokens.add_argument("config", help="Path to configuration file")

    for name, help_text in (
        ("pool-stats", "Show lease statistics of every pool"),
        ("status", "Show server memory and process status"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument(
            "--address",
            help="RPC address, host:port or Unix socket path "
                 "(default: $PG_DHCP_RPC_ADDRESS or built-in default)",
        )
        sub.add_argument(
            "--timeout",
            type=float,
            help="RPC timeout in seconds",
        )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logging_from_args(
        verbose=args.verbose,
        debug=args.debug,
        quiet=args.quiet,
        log_file=args.log_file,
        colors=not args.no_color,
    )

    if args.command == "tokens":
        return dump_tokens(args.config)

    config = RPCConfig.from_env()
    if args.address:
        config.address = args.address
    if args.timeout is not None:
        config.timeout = args.timeout

    if args.command == "pool-stats":
        return show_pool_stats(config)
    return show_status(config)


if __name__ == "__main__":
    sys.exit(main())
