"""
Passto CLI
==========

Click-based command-line front end. Collects the passphrase, service and
algorithm options, derives the password once and prints it.

Usage::

    passto --salt "my-secret" example.com
    passto --hashing sha512 --digest hex --max-length 20 example.com
    passto --alphabet "0123456789abcdefghij" --salting zip --chunk-size 4 example.com
    passto --settings saved.json example.com
"""

import logging
import secrets
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import (
    DEFAULT_ZIP_CHUNK_SIZE,
    DIGEST_BASE64,
    DIGEST_BASE64_URL,
    DIGEST_HEX,
    HASHING_SHA256,
    HASHING_SHA512,
    RANDOM_SALT_BYTES,
    SALTING_APPEND,
    SALTING_PREPEND,
    SALTING_ZIP,
)
from .engine import PasstoEngine
from .errors import PasstoError
from .settings.model import (
    AlgorithmSettings,
    Append,
    Base64,
    Base64Url,
    CustomAlphabet,
    HashingAlgorithm,
    Hex,
    Prepend,
    Zip,
)

logger = logging.getLogger(__name__)

_DIGESTS = {
    DIGEST_HEX: Hex,
    DIGEST_BASE64: Base64,
    DIGEST_BASE64_URL: Base64Url,
}


def _configure_logging(verbose: bool) -> None:
    """Route package logs to stderr through Rich."""
    package_logger = logging.getLogger("passto")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(
                console=Console(stderr=True),
                show_path=False,
                show_time=False,
            )
        )


def _load_settings(path: Optional[str]) -> AlgorithmSettings:
    if path is None:
        return AlgorithmSettings()
    logger.debug("Loading settings from %s", path)
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise click.FileError(path, hint=str(e))
    return AlgorithmSettings.from_string(raw)


def _apply_options(
    settings: AlgorithmSettings,
    digest: Optional[str],
    alphabet: Optional[str],
    hashing: Optional[str],
    salting: Optional[str],
    chunk_size: Optional[int],
    max_length: Optional[int],
    hashing_iterations: Optional[int],
    salting_iterations: Optional[int],
) -> AlgorithmSettings:
    """Override loaded settings with the options given on the command line."""
    if digest is not None and alphabet is not None:
        raise click.UsageError("--digest and --alphabet are mutually exclusive.")
    if chunk_size is not None and salting in (SALTING_PREPEND, SALTING_APPEND):
        raise click.UsageError("--chunk-size only applies to zip salting.")

    changes = {}

    if digest is not None:
        changes["digest"] = _DIGESTS[digest]()
    elif alphabet is not None:
        changes["digest"] = CustomAlphabet(alphabet)

    if hashing is not None:
        changes["hashing"] = HashingAlgorithm(hashing)

    if salting == SALTING_PREPEND:
        changes["salting"] = Prepend()
    elif salting == SALTING_APPEND:
        changes["salting"] = Append()
    elif salting == SALTING_ZIP or chunk_size is not None:
        if chunk_size is None:
            if isinstance(settings.salting, Zip):
                chunk_size = settings.salting.chunk_size
            else:
                chunk_size = DEFAULT_ZIP_CHUNK_SIZE
        changes["salting"] = Zip(chunk_size)

    if max_length is not None:
        changes["max_length"] = max_length
    if hashing_iterations is not None:
        changes["hashing_iterations"] = hashing_iterations
    if salting_iterations is not None:
        changes["salting_iterations"] = salting_iterations

    return settings.replace(**changes)


@click.command()
@click.version_option(__version__, prog_name="passto")
@click.argument("service", required=False)
@click.option(
    "--salt", "-s",
    default=None,
    help="Passphrase used to salt the service. Prompted for when omitted.",
)
@click.option(
    "--random-salt",
    is_flag=True,
    default=False,
    help="Use a random passphrase. The result cannot be reproduced.",
)
@click.option(
    "--digest", "-d",
    type=click.Choice([DIGEST_HEX, DIGEST_BASE64, DIGEST_BASE64_URL]),
    default=None,
    help="Output encoding.",
)
@click.option(
    "--alphabet", "-a",
    default=None,
    help="Encode the output with a custom alphabet (at least 16 characters).",
)
@click.option(
    "--hashing", "-H",
    type=click.Choice([HASHING_SHA256, HASHING_SHA512]),
    default=None,
    help="Hashing algorithm.",
)
@click.option(
    "--salting",
    type=click.Choice([SALTING_PREPEND, SALTING_APPEND, SALTING_ZIP]),
    default=None,
    help="Salting algorithm.",
)
@click.option(
    "--chunk-size",
    type=click.IntRange(min=1),
    default=None,
    help="Chunk size for zip salting (implies zip).",
)
@click.option(
    "--max-length", "-m",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum length of the derived password.",
)
@click.option(
    "--hashing-iterations",
    type=click.IntRange(min=0),
    default=None,
    help="Number of hashing passes.",
)
@click.option(
    "--salting-iterations",
    type=click.IntRange(min=0),
    default=None,
    help="Number of salting passes.",
)
@click.option(
    "--settings", "settings_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Load saved settings (JSON). Explicit options override them.",
)
@click.option(
    "--save-settings",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the effective settings (JSON) to this file.",
)
@click.option(
    "--show-settings",
    is_flag=True,
    default=False,
    help="Print the effective settings and exit.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log pipeline details to stderr.",
)
def cli(
    service: Optional[str],
    salt: Optional[str],
    random_salt: bool,
    digest: Optional[str],
    alphabet: Optional[str],
    hashing: Optional[str],
    salting: Optional[str],
    chunk_size: Optional[int],
    max_length: Optional[int],
    hashing_iterations: Optional[int],
    salting_iterations: Optional[int],
    settings_path: Optional[str],
    save_settings: Optional[str],
    show_settings: bool,
    verbose: bool,
) -> None:
    """Derive a reproducible password for SERVICE.

    The same passphrase, service and settings always give the same
    password; nothing is stored. SERVICE may be left out when only
    showing or saving settings.
    """
    _configure_logging(verbose)

    if salt is not None and random_salt:
        raise click.UsageError("--salt and --random-salt are mutually exclusive.")

    try:
        settings = _apply_options(
            _load_settings(settings_path),
            digest=digest,
            alphabet=alphabet,
            hashing=hashing,
            salting=salting,
            chunk_size=chunk_size,
            max_length=max_length,
            hashing_iterations=hashing_iterations,
            salting_iterations=salting_iterations,
        )
    except PasstoError as e:
        raise click.ClickException(str(e))

    engine = PasstoEngine(settings)

    if save_settings is not None:
        Path(save_settings).write_text(engine.settings_string(), encoding="utf-8")
        logger.info("Settings saved to %s", save_settings)

    if show_settings:
        click.echo(engine.settings_string())
        return

    if service is None:
        if save_settings is not None:
            return
        raise click.UsageError("Missing argument 'SERVICE'.")

    if random_salt:
        logger.warning("Using a random passphrase; this password cannot be derived again")
        passphrase = secrets.token_bytes(RANDOM_SALT_BYTES)
    else:
        if salt is None:
            salt = click.prompt("Passphrase", hide_input=True)
        passphrase = salt.encode("utf-8")

    try:
        password = engine.derive(passphrase, service.encode("utf-8"))
    except PasstoError as e:
        raise click.ClickException(str(e))

    click.echo(password)


def main() -> None:
    """Main entry point for the Passto CLI."""
    cli()


if __name__ == "__main__":
    main()
