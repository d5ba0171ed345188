"""Command-line front end for the car management service.

Supported commands::

    create-car --brand <brand> --model <model> --year <year>
    add-fuel   --carId <id> --liters <liters> --price <price> --odometer <odometer>
    fuel-stats --carId <id>

Each invocation sends exactly one request. Progress and results go to
stdout; every failure message goes to stderr.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable, Sequence

from carfuel._transport import Transport
from carfuel.client import CarFuelClient
from carfuel.config import CarFuelConfig
from carfuel.exceptions import CarFuelError, CarFuelUsageError, NotFoundError, UnknownCommandError
from carfuel.parser import Invocation, parse_tokens

_logger = logging.getLogger(__name__)

ClientFactory = Callable[[], CarFuelClient]
Handler = Callable[[Invocation, ClientFactory], Awaitable[None]]

USAGE = """\
Car Management CLI
==================

Usage: carfuel <command> [options]

Commands:

  create-car
    Create a new car
    Options:
      --brand <brand>    Car brand (required)
      --model <model>    Car model (required)
      --year <year>      Car year (required)
    Example:
      create-car --brand Toyota --model Corolla --year 2018

  add-fuel
    Add a fuel entry to a car
    Options:
      --carId <id>           Car ID (required)
      --liters <liters>      Liters of fuel (required)
      --price <price>        Total price (required)
      --odometer <reading>   Odometer reading (required)
    Example:
      add-fuel --carId 1 --liters 40 --price 52.5 --odometer 45000

  fuel-stats
    Get fuel statistics for a car
    Options:
      --carId <id>    Car ID (required)
    Example:
      fuel-stats --carId 1
"""


def print_usage() -> None:
    print(USAGE)


def _report_car_not_found(exc: NotFoundError) -> None:
    print(f"✗ Error: Car with ID {exc.car_id} not found.", file=sys.stderr)
    print("Please create the car first using create-car command.", file=sys.stderr)


# ── handlers ─────────────────────────────────────────────────


async def _handle_create_car(invocation: Invocation, client_factory: ClientFactory) -> None:
    brand = invocation.require_string("brand")
    model = invocation.require_string("model")
    year = invocation.require_int("year")

    print("Creating car...")
    async with client_factory() as client:
        body = await client.create_car(brand, model, year)

    car_id = CarFuelClient.extract_car_id(body)

    print("✓ Car created successfully!")
    print(f"Car ID: {car_id}")
    print(f"Brand: {brand}")
    print(f"Model: {model}")
    print(f"Year: {year}")


async def _handle_add_fuel(invocation: Invocation, client_factory: ClientFactory) -> None:
    car_id = invocation.require_long("carId")
    liters = invocation.require_double("liters")
    price = invocation.require_double("price")
    odometer = invocation.require_int("odometer")

    print(f"Adding fuel entry for car ID {car_id}...")
    try:
        async with client_factory() as client:
            await client.add_fuel_entry(car_id, liters, price, odometer)
    except NotFoundError as exc:
        _report_car_not_found(exc)
        return

    print("✓ Fuel entry added successfully!")
    print(f"Liters: {liters} L")
    print(f"Price: {price}")
    print(f"Odometer: {odometer} km")


async def _handle_fuel_stats(invocation: Invocation, client_factory: ClientFactory) -> None:
    car_id = invocation.require_long("carId")

    print(f"Fetching fuel statistics for car ID {car_id}...")
    print()
    try:
        async with client_factory() as client:
            body = await client.get_fuel_stats(car_id)
    except NotFoundError as exc:
        _report_car_not_found(exc)
        return

    print(CarFuelClient.format_fuel_stats(body, car_id))


_HANDLERS: dict[str, Handler] = {
    "create-car": _handle_create_car,
    "add-fuel": _handle_add_fuel,
    "fuel-stats": _handle_fuel_stats,
}

COMMANDS: frozenset[str] = frozenset(_HANDLERS)


def resolve_handler(command: str) -> Handler:
    try:
        return _HANDLERS[command]
    except KeyError:
        raise UnknownCommandError(command) from None


async def dispatch(invocation: Invocation, client_factory: ClientFactory) -> None:
    """Run the handler for *invocation*.

    Unknown commands and bad arguments are rejected before
    *client_factory* is called, so no connection is opened for them.
    """
    handler = resolve_handler(invocation.command)
    _logger.debug("Dispatching %s with flags %s", invocation.command, sorted(invocation.arguments))
    await handler(invocation, client_factory)


def _configure_logging(config: CarFuelConfig) -> None:
    if config.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)


def main(
    argv: Sequence[str] | None = None,
    *,
    config: CarFuelConfig | None = None,
    transport: Transport | None = None,
) -> int:
    """Run one command and return the process exit code."""
    tokens = list(sys.argv[1:] if argv is None else argv)
    if not tokens:
        print_usage()
        return 0

    try:
        resolved = config if config is not None else CarFuelConfig.from_env()
        _configure_logging(resolved)

        invocation = parse_tokens(tokens)
        asyncio.run(dispatch(invocation, lambda: CarFuelClient(resolved, transport=transport)))
    except CarFuelUsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(file=sys.stderr)
        print_usage()
        return 1
    except CarFuelError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())
