"""Command-line entry point: sign-in, startup checks, then the menu loop."""

import logging

import click
import typer
from sqlalchemy.exc import SQLAlchemyError

from . import prompts, store
from .config import Settings, get_settings
from .database import dispose_engine, init_engine
from .dining_service import check_dining_access
from .errors import ConfigurationError, CravesError, IdentityNotFound
from .identity_service import resolve_identity
from .menu import run_menu
from .parameter_store import load_database_credentials
from .session import Session

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INTERRUPTED = 130

app = typer.Typer(
    help="Cougar Craves: a random place to eat on campus or a random recipe to cook.",
    add_completion=False,
)


def configure_logging(level: str, log_file: str = "") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=log_file or None,
    )


def connect_database(settings: Settings) -> None:
    """Create the engine from an explicit URL or from SSM credentials."""
    if settings.database_url:
        url = settings.database_url
        logger.info("Using CRAVES_DATABASE_URL; skipping parameter store")
    else:
        credentials = load_database_credentials(settings)
        url = settings.build_database_url(credentials.username, credentials.password)
    try:
        init_engine(url, schema=settings.db_schema)
    except (SQLAlchemyError, ImportError) as e:
        logger.debug(f"Engine creation failed: {e}", exc_info=True)
        raise ConfigurationError(
            f"The database settings are invalid ({type(e).__name__}). "
            "Check CRAVES_DATABASE_URL and CRAVES_DB_DIALECT."
        ) from e


def start_session(settings: Settings) -> Session:
    """Collect credentials and run every startup check.

    Raises:
        CravesError: Whichever check fails first.
    """
    token = prompts.collect_token()
    identifier = prompts.collect_identifier()

    connect_database(settings)
    store.check_connectivity()

    identity = resolve_identity(identifier, token)
    if not identity.exists:
        raise IdentityNotFound()
    check_dining_access(token)

    logger.info(f"Signed in byu_id={identifier}")
    return Session(
        identifier=identifier,
        access_token=token,
        display_name=identity.first_name,
    )


def run() -> int:
    """Run the program and return the process exit code."""
    try:
        settings = get_settings()
        configure_logging(settings.log_level, settings.log_file)
        prompts.clear_screen()
        session = start_session(settings)
        run_menu(session)
        return EXIT_OK
    except CravesError as e:
        logger.debug(f"{type(e).__name__}: {e.message}", exc_info=True)
        click.echo(e.message, err=True)
        return e.exit_code
    except (KeyboardInterrupt, click.exceptions.Abort):
        click.echo("\nAlright, see you next time!")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.debug(f"Unexpected {type(e).__name__}: {e}", exc_info=True)
        click.echo(CravesError.default_message, err=True)
        return CravesError.exit_code
    finally:
        dispose_engine()


@app.command()
def main() -> None:
    """Start the interactive Cougar Craves menu."""
    raise typer.Exit(code=run())
