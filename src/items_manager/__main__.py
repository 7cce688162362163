"""
Main entry point for Items Manager.
Usage: python -m items_manager [--check FILE [--export OUT]]
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .errors import ItemsError
from .items.service import ItemsService
from .settings import AppSettings
from .utils.logging_config import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="items_manager", description="Editor for Lua item tables"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--check", metavar="FILE", help="Parse FILE and print a summary without opening a window"
    )
    parser.add_argument(
        "--export", metavar="OUT", help="With --check, write the parsed items to OUT"
    )
    parser.add_argument(
        "--nested", action="store_true", help="Allow nested tables inside item blocks"
    )
    parser.add_argument("--profile", default="default", help="Settings profile name")
    args = parser.parse_args(argv)
    if args.export and not args.check:
        parser.error("--export requires --check")
    return args


def run_check(args: argparse.Namespace, settings: AppSettings) -> int:
    """Import a file headlessly, print a summary and optionally re-export it."""
    logger = logging.getLogger(f"{__name__}.run_check")
    service = ItemsService(settings, nested=True if args.nested else None)

    try:
        summary = service.import_file(args.check)
    except OSError as e:
        logger.error(f"Cannot read {args.check}: {e}")
        return 1

    print(f"{summary.item_count} items")
    print(f"categories: {', '.join(summary.categories) if summary.categories else '-'}")

    if args.export:
        try:
            path = service.export_file(args.export)
        except (OSError, ItemsError) as e:
            logger.error(f"Cannot export to {args.export}: {e}")
            return 1
        print(f"exported to {path}")

    return 0


def run_gui(settings: AppSettings) -> int:
    """Start the editor window."""
    from PySide6.QtWidgets import QApplication, QMessageBox

    from .gui.main_window import MainWindow

    logger = logging.getLogger(f"{__name__}.main")

    app = QApplication(sys.argv)
    app.setApplicationName("items_manager")
    app.setApplicationVersion(__version__)
    app.setStyle("Fusion")

    validation = settings.validate()
    for warning in validation.warnings:
        logger.warning(f"  {warning}")
    if not validation.is_valid:
        for error in validation.errors:
            logger.error(f"  {error}")
        QMessageBox.critical(
            None,
            "Configuration Error",
            "Configuration validation failed:\n" + "\n".join(validation.errors),
        )
        return 1

    _main_window = MainWindow(settings)  # Keep reference alive for Qt event loop
    _main_window.show()

    logger.info("Application started successfully")
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")

    settings = AppSettings(profile=args.profile)
    setup_logging(settings)
    logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

    try:
        if args.check:
            return run_check(args, settings)
        return run_gui(settings)
    except Exception:
        logger.exception("Unhandled exception in main")
        return 1


if __name__ == "__main__":
    sys.exit(main())
