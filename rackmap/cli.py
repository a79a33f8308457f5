import logging

import click

from rackmap import __version__, log
from rackmap.store import PrefixMap


class EntryParamType(click.ParamType):
    # Like click's TupleType, but for `--entry key=value` instead of `--entry key value`
    name = "entry"

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value
        key, sep, val = value.partition("=")
        if not sep or not key.strip():
            self.fail(f"Expected KEY=VALUE for entry: {value}", param, ctx)
        return key.strip(), val.strip()


@click.command()
@click.version_option(__version__)
@click.option(
    "--entry",
    type=EntryParamType(),
    multiple=True,
    help="Key to store, e.g. --entry /dc1/rack3/host7=h7. Use same option for multiple entries",
)
@click.option("--remove", "removals", multiple=True, help="Key to remove after loading entries")
@click.option("--dump/--no-dump", default=False, help="Print the key tree before answering queries")
@click.option(
    "--log-level",
    type=click.Choice(
        [logging.getLevelName(i) for i in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR)],
        case_sensitive=False,
    ),
    envvar="RACKMAP_LOG_LEVEL",
    help='Log level (debug, info, warning, error), also read from $RACKMAP_LOG_LEVEL (default: "info")',
)
@click.argument("queries", nargs=-1)
def main(**args):
    if args.get("log_level"):
        log.setLevel(args["log_level"].upper())

    racks = PrefixMap()
    for key, value in args["entry"]:
        if racks.put(key, value) is not None:
            log.warning(f"Entry {key} given more than once, keeping {value}")
    log.info(f"Loaded {racks.size()} entries")

    for key in args["removals"]:
        if racks.remove(key) is None:
            log.warning(f"Cannot remove {key}: no such entry")
        else:
            log.info(f"Removed {key}")

    if args["dump"]:
        click.echo(racks.trie.format_tree())

    for query in args["queries"]:
        target = racks.get_target(query)
        if target is None:
            click.echo(f"{query}\t-")
        else:
            click.echo(f"{query}\t{target.key}\t{target.value}")
