import logging

from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> None:
    """Route every minishop logger through rich. Safe to call more than once."""
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
